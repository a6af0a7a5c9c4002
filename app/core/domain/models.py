from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# --- Base ---

class CandidateFields(BaseModel):
    """
    Profile fields shared by every stage of a candidate's lifecycle.

    Attribute names are snake_case; the wire format (JSON / form fields)
    uses camelCase aliases (e.g. 'firstName', 'workExperience').
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    first_name: str = Field(..., min_length=1, description="Given name")
    last_name: str = Field(..., min_length=1, description="Family name")
    email: str = Field(..., min_length=1, description="Unique contact address (exact match)")

    phone: Optional[str] = None
    address: Optional[str] = None
    education: Optional[str] = Field(None, description="Free text, unstructured")
    work_experience: Optional[str] = Field(None, description="Free text, unstructured")

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        # Checked, never rewritten: the email is stored and matched exactly as sent
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("phone", "address", "education", "work_experience", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # HTML forms submit untouched inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value

# --- Value Objects ---

class CandidateDraft(CandidateFields):
    """
    The validated input of the Add-Candidate use case.
    Construction fails closed: a draft with a blank required field never exists.
    """

class NewCandidate(CandidateFields):
    """
    The candidate-to-save: draft fields plus the optional stored CV reference.
    Identity and timestamps are left to the repository.
    """
    cv_path: Optional[str] = None

class FileInput(BaseModel):
    """An uploaded attachment as received from the inbound boundary."""
    file_name: str
    mime_type: str
    content: bytes

# --- Entities ---

class Candidate(NewCandidate):
    """
    A persisted applicant.
    `id`, `created_at` and `updated_at` are assigned by storage.
    """
    id: int
    created_at: datetime
    updated_at: datetime
