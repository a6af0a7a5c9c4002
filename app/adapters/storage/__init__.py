# app\adapters\storage\__init__.py
"""
File Storage Adapters.

Implementations of IFileStorage:
- FileSystemStorage: local disk (default).
- S3FileStorage: S3 / S3-compatible object store.
"""

from .filesystem_storage import FileSystemStorage
from .s3_storage import S3FileStorage

__all__ = [
    "FileSystemStorage",
    "S3FileStorage",
]
