# app/adapters/persistence/sqlalchemy_candidate_repo.py
from typing import Optional

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.ports.candidate_repository import ICandidateRepository
from app.core.domain.models import Candidate, NewCandidate
from app.core.domain.exceptions import DuplicateEmailError, StorageError
from app.adapters.persistence.models import CandidateRecord

logger = structlog.get_logger()


class SQLAlchemyCandidateRepository(ICandidateRepository):
    """
    Concrete implementation of the Candidate Repository on a relational database.
    Every call runs in its own short-lived session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(record: CandidateRecord) -> Candidate:
        return Candidate(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone=record.phone,
            address=record.address,
            education=record.education,
            work_experience=record.work_experience,
            cv_path=record.cv_path,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    # --- Interface Implementation ---

    async def find_by_email(self, email: str) -> Optional[Candidate]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(CandidateRecord).where(CandidateRecord.email == email)
                )
                record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("repo_query_failed", email=email, error=str(e))
            raise StorageError("Could not query candidates.") from e

        return self._to_entity(record) if record is not None else None

    async def save(self, candidate: NewCandidate) -> Candidate:
        record = CandidateRecord(**candidate.model_dump())

        try:
            async with self.session_factory() as session:
                session.add(record)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                await session.refresh(record)
        except IntegrityError as e:
            # The only constraint a valid NewCandidate can violate is the email index
            logger.warning("repo_unique_violation", email=candidate.email)
            raise DuplicateEmailError(candidate.email) from e
        except SQLAlchemyError as e:
            logger.error("repo_write_failed", email=candidate.email, error=str(e))
            raise StorageError("Could not persist candidate.") from e

        logger.debug("repo_candidate_saved", candidate_id=record.id)
        return self._to_entity(record)

    async def health_check(self) -> bool:
        try:
            async with self.session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("repo_health_check_failed", error=str(e))
            return False
