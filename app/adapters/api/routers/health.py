# app\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, status, Response
from typing import Dict
import structlog

from app import __version__
from app.core.ports.candidate_repository import ICandidateRepository
from app.core.ports.file_storage import IFileStorage
from app.adapters.api.dependencies import get_candidate_repository, get_file_storage
from app.adapters.api.schemas import ReadinessResponse
from app.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the process is serving requests.
    """
    return {"status": "ok", "service": settings.APP_NAME, "version": __version__}

@router.get("/ready", status_code=status.HTTP_200_OK, response_model=ReadinessResponse)
async def readiness_probe(
    response: Response,
    repo: ICandidateRepository = Depends(get_candidate_repository),
    storage: IFileStorage = Depends(get_file_storage),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Performs deep checks on dependencies (Database, File Storage).
    Returns 503 Service Unavailable if any component is down.
    """
    health_status = {
        "database": "down",
        "storage": "down",
    }

    # 1. Check Database
    try:
        if await repo.health_check():
            health_status["database"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="database", error=str(e))

    # 2. Check File Storage
    try:
        if await storage.health_check():
            health_status["storage"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="storage", error=str(e))

    if not all(s == "up" for s in health_status.values()):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
