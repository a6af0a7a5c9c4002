from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class StorageBackend(str, Enum):
    FILESYSTEM = "filesystem"
    S3 = "s3"


PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "candidate-intake"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "candidate-intake"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Database ---
    # Async driver URL: sqlite+aiosqlite://... locally, postgresql+asyncpg://... in prod
    DATABASE_URL: str = "sqlite+aiosqlite:///./candidates.db"
    DATABASE_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # --- File Storage ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM
    UPLOAD_DIR: str = "uploads"
    MAX_CV_SIZE_BYTES: int = 5 * 1024 * 1024
    ALLOWED_CV_MIME_TYPES: List[str] = [PDF_MIME_TYPE, DOCX_MIME_TYPE]

    # S3 Config
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_REGION: str = "us-east-1"
    AWS_BUCKET_NAME: str = "candidate-intake-uploads"
    S3_KEY_PREFIX: str = "uploads"
    S3_ENDPOINT_URL: Optional[str] = None  # MinIO / localstack

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
