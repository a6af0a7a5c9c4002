# tests\core\test_domain_models.py
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.core.domain.models import Candidate, CandidateDraft, FileInput, NewCandidate
from app.core.domain.exceptions import (
    DomainError,
    DuplicateEmailError,
    FileStorageError,
    RecordPersistenceError,
    StorageError,
)

class TestCandidateDraftModel:
    def test_valid_draft_creation(self):
        """Should create a draft from snake_case names with optional fields unset."""
        draft = CandidateDraft(first_name="Ada", last_name="Lovelace", email="ada@example.com")
        assert draft.first_name == "Ada"
        assert draft.phone is None
        assert draft.work_experience is None

    def test_draft_accepts_camel_case_aliases(self):
        """The wire format (camelCase) populates the same attributes."""
        draft = CandidateDraft.model_validate({
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "workExperience": "Analytical Engine",
        })
        assert draft.last_name == "Lovelace"
        assert draft.work_experience == "Analytical Engine"

    def test_draft_missing_required_fields(self):
        """Should raise ValidationError if a required field is missing."""
        with pytest.raises(ValidationError):
            CandidateDraft(first_name="Ada", last_name="Lovelace")

        with pytest.raises(ValidationError):
            CandidateDraft(last_name="Lovelace", email="ada@example.com")

    @pytest.mark.parametrize("field", ["first_name", "last_name", "email"])
    def test_draft_rejects_blank_required_field(self, field):
        """Whitespace-only required fields fail closed."""
        data = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}
        data[field] = "   "
        with pytest.raises(ValidationError):
            CandidateDraft(**data)

    def test_blank_optional_fields_become_none(self):
        """Empty form inputs are stored as absent, not as empty strings."""
        draft = CandidateDraft(
            first_name="Ada", last_name="Lovelace", email="ada@example.com",
            phone="", address="  ",
        )
        assert draft.phone is None
        assert draft.address is None

    def test_email_is_not_case_folded(self):
        draft = CandidateDraft(first_name="Ada", last_name="Lovelace", email="Ada@Example.com")
        assert draft.email == "Ada@Example.com"

class TestCandidateEntity:
    def test_serializes_with_camel_case_keys(self):
        """The JSON form keeps the public contract: camelCase, cvPath null when absent."""
        now = datetime(2024, 5, 1, tzinfo=timezone.utc)
        candidate = Candidate(
            id=3, first_name="Ada", last_name="Lovelace", email="ada@example.com",
            created_at=now, updated_at=now,
        )
        data = candidate.model_dump(mode="json", by_alias=True)

        assert data["id"] == 3
        assert data["firstName"] == "Ada"
        assert data["cvPath"] is None
        assert "createdAt" in data and "updatedAt" in data

    def test_new_candidate_carries_cv_path(self):
        draft = CandidateDraft(first_name="Ada", last_name="Lovelace", email="ada@example.com")
        new = NewCandidate(**draft.model_dump(), cv_path="cvs/ada.pdf")
        assert new.cv_path == "cvs/ada.pdf"
        assert new.email == draft.email

class TestFileInputModel:
    def test_valid_file_input(self):
        f = FileInput(file_name="cv.pdf", mime_type="application/pdf", content=b"%PDF")
        assert f.content == b"%PDF"

class TestDomainErrors:
    def test_error_messages(self):
        assert DuplicateEmailError("a@b.c").message == "Candidate with this email already exists."
        assert DuplicateEmailError("a@b.c").email == "a@b.c"
        assert FileStorageError().message == "Could not save CV file."
        assert RecordPersistenceError().message == "Could not save candidate data."

    def test_hierarchy(self):
        for exc in (DuplicateEmailError(), FileStorageError(), RecordPersistenceError(), StorageError("x")):
            assert isinstance(exc, DomainError)

class TestCandidateDraftPreservesInput:
    def test_email_is_stored_verbatim(self):
        """Surrounding whitespace is not trimmed; equality stays exact."""
        draft = CandidateDraft(first_name=" Ada", last_name="Lovelace ", email=" ada@example.com ")
        assert draft.email == " ada@example.com "
        assert draft.first_name == " Ada"
        assert draft.last_name == "Lovelace "
