# app/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Business Rule Violations ---

class DuplicateEmailError(DomainError):
    """Raised when a candidate with the same email is already registered."""
    def __init__(self, email: str = ""):
        self.email = email
        super().__init__("Candidate with this email already exists.")

# --- Persistence Failures (Use Case level) ---

class FileStorageError(DomainError):
    """Raised when the CV attachment could not be durably written."""
    def __init__(self, message: str = "Could not save CV file."):
        super().__init__(message)

class RecordPersistenceError(DomainError):
    """
    Raised when the candidate record could not be durably written.
    A CV stored earlier in the same request is NOT removed.
    """
    def __init__(self, message: str = "Could not save candidate data."):
        super().__init__(message)

# --- Adapter Failures ---

class StorageError(DomainError):
    """
    Generic collaborator failure raised by adapters.
    Wraps the driver/library error (via __cause__) without exposing its type.
    """
