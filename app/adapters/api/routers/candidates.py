# app\adapters\api\routers\candidates.py
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse

from app.core.domain.models import CandidateDraft, FileInput
from app.core.domain.exceptions import (
    DuplicateEmailError,
    FileStorageError,
    RecordPersistenceError,
)
from app.core.use_cases.add_candidate import AddCandidate
from app.adapters.api.dependencies import get_add_candidate_use_case
from app.adapters.api.schemas import ERROR_RESPONSES
from app.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/candidates", tags=["Candidates"])

REQUIRED_FIELDS_MESSAGE = "First name, last name, and email are required."
INVALID_FILE_TYPE_MESSAGE = "Invalid file type. Only PDF and DOCX are allowed."
FILE_TOO_LARGE_MESSAGE = "File too large"
EMPTY_FILE_MESSAGE = "Uploaded CV is empty."
PROCESSING_ERROR_MESSAGE = "An error occurred while processing your request."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


async def _read_cv(cv: Optional[UploadFile]) -> Optional[FileInput]:
    """
    Validates the uploaded CV and loads it into memory.
    A part without a file name counts as no file at all.
    """
    if cv is None or not cv.filename:
        return None

    if cv.content_type not in settings.ALLOWED_CV_MIME_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_FILE_TYPE_MESSAGE)

    # Read one byte past the limit so oversized uploads are detected without loading them whole
    content = await cv.read(settings.MAX_CV_SIZE_BYTES + 1)
    if len(content) > settings.MAX_CV_SIZE_BYTES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=FILE_TOO_LARGE_MESSAGE)
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_FILE_MESSAGE)

    return FileInput(file_name=cv.filename, mime_type=cv.content_type, content=content)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Register a candidate (multipart form, optional CV)",
)
async def add_candidate(
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    education: Optional[str] = Form(None),
    work_experience: Optional[str] = Form(None, alias="workExperience"),
    cv: Optional[UploadFile] = File(None, description="PDF or DOCX, 5 MiB max"),
    use_case: AddCandidate = Depends(get_add_candidate_use_case),
):
    """
    Registers a new candidate.

    **Form fields:** `firstName`, `lastName`, `email` (required), `phone`,
    `address`, `education`, `workExperience` (optional).

    **File:** `cv` (optional, PDF or DOCX).

    **Returns:** the stored Candidate (201). `cvPath` is null when no CV was sent.
    """
    cv_file = await _read_cv(cv)

    if any(_is_blank(v) for v in (first_name, last_name, email)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REQUIRED_FIELDS_MESSAGE)

    draft = CandidateDraft(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        address=address,
        education=education,
        work_experience=work_experience,
    )

    try:
        candidate = await use_case.execute(draft, cv_file)

    except DuplicateEmailError as e:
        # Map Domain Error -> HTTP 409
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

    except (FileStorageError, RecordPersistenceError) as e:
        logger.error("add_candidate_failed", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": PROCESSING_ERROR_MESSAGE, "details": e.message},
        )

    except Exception as e:
        # Never leak internals to the client
        logger.critical("unexpected_add_candidate_crash", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_MESSAGE,
        )

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=candidate.model_dump(mode="json", by_alias=True),
    )
