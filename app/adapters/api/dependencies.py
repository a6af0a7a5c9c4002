# app/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from app.core.ports.candidate_repository import ICandidateRepository
from app.core.ports.file_storage import IFileStorage
from app.core.use_cases.add_candidate import AddCandidate
from app.shared.container import Container


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_add_candidate_use_case(
    use_case: AddCandidate = Depends(Provide[Container.add_candidate_use_case]),
) -> AddCandidate:
    """Dependency to inject the AddCandidate interactor (container-managed)."""
    return use_case


# -----------------------------------------------------------------------------
# Infrastructure (health probes)
# -----------------------------------------------------------------------------
@inject
def get_candidate_repository(
    repo: ICandidateRepository = Depends(Provide[Container.candidate_repository]),
) -> ICandidateRepository:
    return repo


@inject
def get_file_storage(
    storage: IFileStorage = Depends(Provide[Container.file_storage]),
) -> IFileStorage:
    return storage
