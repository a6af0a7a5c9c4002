# app/adapters/storage/s3_storage.py
import asyncio
from typing import Any

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from app.core.ports.file_storage import IFileStorage
from app.core.domain.models import FileInput
from app.core.domain.exceptions import StorageError
from app.adapters.storage.paths import normalize_destination, safe_basename, validate_content
from app.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class S3FileStorage(IFileStorage):
    """
    Production Storage Adapter.
    Stores uploads as objects in an S3 bucket (or any S3-compatible store).

    Object key: '<prefix>/<destination>/<basename>'. The returned reference
    omits the prefix, so it matches what the filesystem adapter returns.
    """

    def __init__(self, client: Any, bucket: str, prefix: str = ""):
        # boto3 client; built by the container so tests can pass a mock
        self.s3_client = client
        self.bucket = bucket
        self.prefix = prefix.strip("/")

    def _object_key(self, reference: str) -> str:
        return f"{self.prefix}/{reference}" if self.prefix else reference

    async def save(self, file: FileInput, destination: str) -> str:
        """
        Uploads the file to S3.
        Non-blocking (runs in thread pool).
        """
        content = validate_content(file.content)
        reference = f"{normalize_destination(destination)}/{safe_basename(file.file_name)}"
        key = self._object_key(reference)

        with tracer.start_as_current_span("s3_upload") as span:
            span.set_attribute("s3.bucket", self.bucket)
            span.set_attribute("s3.key", key)

            try:
                await asyncio.to_thread(self._upload_sync, key, content, file.mime_type)
            except (ClientError, BotoCoreError) as e:
                logger.error("s3_upload_failed", bucket=self.bucket, key=key, error=str(e))
                raise StorageError(f"Could not upload {reference!r}.") from e

        return reference

    async def health_check(self) -> bool:
        try:
            await asyncio.to_thread(self.s3_client.head_bucket, Bucket=self.bucket)
            return True
        except (ClientError, BotoCoreError) as e:
            logger.warning("s3_health_check_failed", bucket=self.bucket, error=str(e))
            return False

    # --- Synchronous Helpers (executed in thread pool) ---

    def _upload_sync(self, key: str, data: bytes, content_type: str):
        self.s3_client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=content_type or "application/octet-stream",
        )
