# app/adapters/storage/paths.py
from app.core.domain.exceptions import StorageError


def safe_basename(file_name: str) -> str:
    """
    Reduces an untrusted client file name to its final path component.
    Both '/' and '\\' count as separators ('C:\\docs\\cv.pdf' -> 'cv.pdf').
    """
    name = (file_name or "").replace("\\", "/").rsplit("/", 1)[-1].strip()
    if name in ("", ".", "..") or "\x00" in name:
        raise StorageError(f"Invalid file name: {file_name!r}")
    return name


def normalize_destination(destination: str) -> str:
    """Returns the destination as forward-slash segments, refusing traversal."""
    parts = [p for p in (destination or "").replace("\\", "/").split("/") if p and p != "."]
    if not parts or ".." in parts:
        raise StorageError(f"Invalid destination: {destination!r}")
    return "/".join(parts)


def validate_content(content: object) -> bytes:
    if not isinstance(content, (bytes, bytearray)) or len(content) == 0:
        raise StorageError("File content is missing or invalid.")
    return bytes(content)
