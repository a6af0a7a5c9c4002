# app/core/ports/candidate_repository.py
from typing import Optional, Protocol

from app.core.domain.models import Candidate, NewCandidate


class ICandidateRepository(Protocol):
    """
    Port for persisting and looking up Candidates.
    Implementations could be SqlAlchemyRepo, a document store, or an in-memory fake.
    """

    async def find_by_email(self, email: str) -> Optional[Candidate]:
        """
        Looks up a candidate by exact email match.

        Returns:
            The Candidate if found, None otherwise. Absence is not an error.

        Raises:
            StorageError: If the underlying storage cannot be queried.
        """
        ...

    async def save(self, candidate: NewCandidate) -> Candidate:
        """
        Persists a new candidate, assigning `id`, `created_at` and `updated_at`.

        Raises:
            DuplicateEmailError: If the storage-level unique constraint rejects the email.
            StorageError: On any other persistence failure.
        """
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
