# app/core/ports/file_storage.py
from typing import Protocol

from app.core.domain.models import FileInput


class IFileStorage(Protocol):
    """
    Port for persisting raw uploaded bytes (local disk, object store, ...).
    """

    async def save(self, file: FileInput, destination: str) -> str:
        """
        Stores the file under a logical destination (subdirectory / key prefix).

        The file name is untrusted and is reduced to its basename before use.
        A same-named file at the same destination is overwritten.

        Args:
            file: The uploaded attachment.
            destination: Caller-chosen logical subdirectory (e.g. 'cvs').

        Returns:
            The reference path '<destination>/<basename>', always with forward slashes.

        Raises:
            StorageError: If the content is missing/invalid or the write fails.
        """
        ...

    async def health_check(self) -> bool:
        """Returns True if the storage backend is reachable and writable."""
        ...
