# app/adapters/storage/filesystem_storage.py
import os
from pathlib import Path

import aiofiles
import structlog

from app.core.ports.file_storage import IFileStorage
from app.core.domain.models import FileInput
from app.core.domain.exceptions import StorageError
from app.adapters.storage.paths import normalize_destination, safe_basename, validate_content

logger = structlog.get_logger()


class FileSystemStorage(IFileStorage):
    """
    Stores uploads on local disk under a configured root.

    Layout: <base_path>/<destination>/<basename>
    The returned reference is relative to the root: '<destination>/<basename>'.
    """

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)
        # Ensure the upload root exists
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def save(self, file: FileInput, destination: str) -> str:
        content = validate_content(file.content)
        name = safe_basename(file.file_name)
        dest = normalize_destination(destination)

        target_dir = self.base_path / dest
        target = target_dir / name

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            # Same-named files are overwritten (last write wins)
            async with aiofiles.open(target, mode="wb") as f:
                await f.write(content)
        except (OSError, ValueError) as e:
            # ValueError: names the OS cannot represent (e.g. embedded NUL)
            logger.error("storage_write_failed", path=str(target), error=str(e))
            raise StorageError(f"Could not write file {name!r}.") from e

        logger.debug("storage_file_written", path=str(target), size=len(content))
        return f"{dest}/{name}"

    async def health_check(self) -> bool:
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("storage_health_check_failed", path=str(self.base_path), error=str(e))
            return False
        return os.access(self.base_path, os.W_OK)
