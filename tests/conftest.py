# tests\conftest.py
import os

# Must be set before app.shared.config builds the Settings singleton
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "console")

from datetime import datetime, timezone
from typing import Dict, Optional

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.shared.config import PDF_MIME_TYPE
from app.shared.container import container as app_container
from app.core.domain.models import Candidate, CandidateDraft, FileInput, NewCandidate
from app.core.domain.exceptions import DuplicateEmailError
from app.core.ports.candidate_repository import ICandidateRepository
from app.core.ports.file_storage import IFileStorage


class InMemoryCandidateRepository:
    """Dict-backed ICandidateRepository with the same uniqueness rule as the database."""

    def __init__(self):
        self.records: Dict[str, Candidate] = {}
        self._next_id = 1

    async def find_by_email(self, email: str) -> Optional[Candidate]:
        return self.records.get(email)

    async def save(self, candidate: NewCandidate) -> Candidate:
        if candidate.email in self.records:
            raise DuplicateEmailError(candidate.email)
        now = datetime.now(timezone.utc)
        stored = Candidate(id=self._next_id, created_at=now, updated_at=now, **candidate.model_dump())
        self._next_id += 1
        self.records[stored.email] = stored
        return stored

    async def health_check(self) -> bool:
        return True


def _as_persisted(candidate: NewCandidate) -> Candidate:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Candidate(id=1, created_at=now, updated_at=now, **candidate.model_dump())


@pytest.fixture(scope="function")
def mock_repository():
    """Returns a mock Candidate Repository (empty, echoes saves back with id=1)."""
    repo = MagicMock(spec=ICandidateRepository)
    # Async methods must be mocked with AsyncMock
    repo.find_by_email = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=_as_persisted)
    repo.health_check = AsyncMock(return_value=True)
    return repo

@pytest.fixture(scope="function")
def mock_file_storage():
    """Returns a mock File Storage that 'stores' under '<destination>/<file_name>'."""
    storage = MagicMock(spec=IFileStorage)
    storage.save = AsyncMock(side_effect=lambda file, destination: f"{destination}/{file.file_name}")
    storage.health_check = AsyncMock(return_value=True)
    return storage

@pytest.fixture(scope="function")
def memory_repository():
    return InMemoryCandidateRepository()

@pytest.fixture(scope="function")
def container(mock_repository, mock_file_storage):
    """
    Provides the application's DI container with infrastructure replaced by mocks.
    The app wires this same instance, so overrides reach the HTTP layer too.
    """
    app_container.candidate_repository.override(mock_repository)
    app_container.file_storage.override(mock_file_storage)

    yield app_container

    # Clean up overrides after test
    app_container.candidate_repository.reset_override()
    app_container.file_storage.reset_override()

@pytest.fixture
def sample_draft():
    """Provides a valid draft with only the required fields."""
    return CandidateDraft(first_name="John", last_name="Doe", email="john.doe@example.com")

@pytest.fixture
def cv_file():
    """Provides a small PDF attachment."""
    return FileInput(
        file_name="JohnDoe_CV.pdf",
        mime_type=PDF_MIME_TYPE,
        content=b"%PDF-1.4\n%fake resume\n",
    )
