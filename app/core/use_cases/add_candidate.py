# app/core/use_cases/add_candidate.py
import structlog
from typing import Optional

from app.core.domain.models import Candidate, CandidateDraft, FileInput, NewCandidate
from app.core.domain.exceptions import (
    DuplicateEmailError,
    FileStorageError,
    RecordPersistenceError,
)
from app.core.ports.candidate_repository import ICandidateRepository
from app.core.ports.file_storage import IFileStorage
from app.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

# Logical destination for every stored résumé (e.g. uploads/cvs/JohnDoe_CV.pdf)
CV_DESTINATION = "cvs"

class AddCandidate:
    """
    Use Case: Registers a new candidate with an optional CV attachment.

    Steps:
    1. Rejects the request if the email is already registered.
    2. Stores the CV (if any) via the File Storage Port.
    3. Persists the candidate record via the Repository Port.

    The file write and the record write are NOT atomic. If the record write
    fails after the CV was stored, the file stays where it is.
    """

    def __init__(self, repository: ICandidateRepository, file_storage: IFileStorage):
        # We inject the interfaces (Ports), not the concrete implementations
        self.repository = repository
        self.file_storage = file_storage

    async def execute(self, draft: CandidateDraft, cv_file: Optional[FileInput] = None) -> Candidate:
        """
        Executes the add-candidate flow.

        Args:
            draft: Validated profile data (required fields guaranteed non-empty).
            cv_file: Optional résumé attachment.

        Returns:
            Candidate: The persisted entity, as returned by the repository.

        Raises:
            DuplicateEmailError: The email is already registered.
            FileStorageError: The CV could not be stored (no record is written).
            RecordPersistenceError: The record could not be stored.
        """
        with tracer.start_as_current_span("use_case.add_candidate") as span:
            span.set_attribute("app.has_cv", cv_file is not None)

            logger.info("add_candidate_started", email=draft.email, has_cv=cv_file is not None)

            # 1. Uniqueness check (storage errors propagate untouched)
            existing = await self.repository.find_by_email(draft.email)
            if existing is not None:
                logger.info("add_candidate_duplicate", email=draft.email, existing_id=existing.id)
                raise DuplicateEmailError(draft.email)

            # 2. Store the CV
            cv_path: Optional[str] = None
            if cv_file is not None:
                try:
                    cv_path = await self.file_storage.save(cv_file, CV_DESTINATION)
                except Exception as e:
                    logger.error("cv_storage_failed", email=draft.email, error=str(e))
                    raise FileStorageError() from e
                logger.info("cv_stored", email=draft.email, cv_path=cv_path)

            # 3. Build the candidate-to-save
            new_candidate = NewCandidate(**draft.model_dump(), cv_path=cv_path)

            # 4. Persist the record
            try:
                candidate = await self.repository.save(new_candidate)
            except DuplicateEmailError:
                # Lost a race against a concurrent submission; the unique constraint caught it.
                logger.warning("add_candidate_duplicate_on_save", email=draft.email, cv_path=cv_path)
                raise
            except Exception as e:
                logger.error("candidate_persistence_failed", email=draft.email, error=str(e))
                if cv_path is not None:
                    # TODO: hand orphaned CVs to a cleanup job once one exists.
                    logger.warning("cv_orphaned", cv_path=cv_path)
                raise RecordPersistenceError() from e

            span.set_attribute("app.candidate_id", candidate.id)
            logger.info("add_candidate_success", candidate_id=candidate.id, cv_path=candidate.cv_path)

            return candidate
