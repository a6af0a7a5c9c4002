# app\shared\container.py
import boto3
from dependency_injector import containers, providers

from app.shared.config import settings, StorageBackend
from app.adapters.persistence.database import build_engine, build_session_factory
from app.adapters.persistence.sqlalchemy_candidate_repo import SQLAlchemyCandidateRepository
from app.adapters.storage.filesystem_storage import FileSystemStorage
from app.adapters.storage.s3_storage import S3FileStorage

from app.core.use_cases.add_candidate import AddCandidate


def _storage_backend_key(backend) -> str:
    # Accepts the enum (from Settings) or a plain string (from overrides)
    return StorageBackend(backend).value


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Database (Singleton: One engine / connection pool shared)
    db_engine = providers.Singleton(
        build_engine,
        database_url=config.DATABASE_URL,
        echo=config.DATABASE_ECHO,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    candidate_repository = providers.Singleton(
        SQLAlchemyCandidateRepository,
        session_factory=session_factory,
    )

    # Object store client (only built when the S3 backend is selected)
    s3_client = providers.Singleton(
        boto3.client,
        "s3",
        region_name=config.AWS_REGION,
        aws_access_key_id=config.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=config.AWS_SECRET_ACCESS_KEY,
        endpoint_url=config.S3_ENDPOINT_URL,
    )

    # File Storage: chosen by STORAGE_BACKEND
    file_storage = providers.Selector(
        providers.Callable(_storage_backend_key, config.STORAGE_BACKEND),
        filesystem=providers.Singleton(
            FileSystemStorage,
            base_path=config.UPLOAD_DIR,
        ),
        s3=providers.Singleton(
            S3FileStorage,
            client=s3_client,
            bucket=config.AWS_BUCKET_NAME,
            prefix=config.S3_KEY_PREFIX,
        ),
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.
    add_candidate_use_case = providers.Factory(
        AddCandidate,
        repository=candidate_repository,
        file_storage=file_storage,
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
