# tests\adapters\test_s3_storage.py
import pytest
from unittest.mock import MagicMock
from botocore.exceptions import ClientError, EndpointConnectionError

from app.adapters.storage.s3_storage import S3FileStorage
from app.core.domain.models import FileInput
from app.core.domain.exceptions import StorageError
from app.shared.config import DOCX_MIME_TYPE

@pytest.fixture
def s3_client():
    return MagicMock()

@pytest.fixture
def docx_file():
    return FileInput(file_name="C:\\Users\\jane\\Jane_CV.docx", mime_type=DOCX_MIME_TYPE, content=b"PK\x03\x04docx")

@pytest.mark.asyncio
class TestS3FileStorage:

    async def test_save_puts_object_with_prefix_and_content_type(self, s3_client, docx_file):
        """
        Scenario: A DOCX upload is stored with key prefix 'uploads'.
        Expected: put_object under 'uploads/cvs/<basename>'; reference omits the prefix.
        """
        # Arrange
        storage = S3FileStorage(s3_client, bucket="cv-bucket", prefix="uploads/")

        # Act
        ref = await storage.save(docx_file, "cvs")

        # Assert
        assert ref == "cvs/Jane_CV.docx"
        s3_client.put_object.assert_called_once_with(
            Bucket="cv-bucket",
            Key="uploads/cvs/Jane_CV.docx",
            Body=b"PK\x03\x04docx",
            ContentType=DOCX_MIME_TYPE,
        )

    async def test_save_without_prefix(self, s3_client, docx_file):
        storage = S3FileStorage(s3_client, bucket="cv-bucket")

        await storage.save(docx_file, "cvs")

        assert s3_client.put_object.call_args.kwargs["Key"] == "cvs/Jane_CV.docx"

    async def test_client_error_wrapped(self, s3_client, docx_file):
        """
        Scenario: S3 rejects the upload.
        Expected: StorageError chained from the botocore error; no retry.
        """
        # Arrange
        s3_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        storage = S3FileStorage(s3_client, bucket="cv-bucket")

        # Act & Assert
        with pytest.raises(StorageError) as excinfo:
            await storage.save(docx_file, "cvs")

        assert isinstance(excinfo.value.__cause__, ClientError)
        assert s3_client.put_object.call_count == 1

    async def test_empty_content_rejected_before_upload(self, s3_client):
        storage = S3FileStorage(s3_client, bucket="cv-bucket")

        with pytest.raises(StorageError):
            await storage.save(FileInput(file_name="cv.docx", mime_type=DOCX_MIME_TYPE, content=b""), "cvs")

        s3_client.put_object.assert_not_called()

    async def test_health_check(self, s3_client):
        storage = S3FileStorage(s3_client, bucket="cv-bucket")

        assert await storage.health_check() is True
        s3_client.head_bucket.assert_called_once_with(Bucket="cv-bucket")

        s3_client.head_bucket.side_effect = EndpointConnectionError(endpoint_url="http://localhost:9000")
        assert await storage.health_check() is False
