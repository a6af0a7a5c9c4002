# app\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces allow the Core Domain to interact with the
outside world (Database, Disk, Object Store) without knowing the
implementation details.
"""

from .candidate_repository import ICandidateRepository
from .file_storage import IFileStorage

__all__ = [
    "ICandidateRepository",
    "IFileStorage",
]
