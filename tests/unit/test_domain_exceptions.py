"""Domain exceptions: codes, details, user messages and HTTP status mapping."""

import pytest

from crm_templates.core.exception_handlers import status_for_error_code
from crm_templates.domain.exceptions import (
    USER_MESSAGES,
    CrmTemplatesException,
    MalformedContentException,
    SlugConflictException,
    SqlNotConfiguredException,
    TemplateNotFoundException,
    ValidationException,
    get_user_message,
)


def test_base_exception_defaults_code_to_class_name() -> None:
    exc = CrmTemplatesException("boom")
    assert exc.error_code == "CrmTemplatesException"
    assert exc.details == {}
    assert str(exc) == "boom"


def test_to_dict() -> None:
    exc = ValidationException("Field name is required", field="fields[0].field_name")
    assert exc.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "Field name is required",
        "details": {"field": "fields[0].field_name"},
    }


def test_validation_without_field_has_empty_details() -> None:
    assert ValidationException("bad").details == {}


def test_malformed_content_keeps_reason() -> None:
    exc = MalformedContentException("Content must be a JSON object")
    assert exc.error_code == "MALFORMED_CONTENT"
    assert exc.details == {"field": "content", "reason": "Content must be a JSON object"}


def test_slug_conflict_message_is_generic() -> None:
    exc = SlugConflictException("offre-standard")
    assert exc.message == USER_MESSAGES["SLUG_CONFLICT"]
    assert "offre-standard" not in exc.message
    assert exc.details == {"slug": "offre-standard"}


def test_not_found_details() -> None:
    exc = TemplateNotFoundException("tpl1")
    assert exc.error_code == "NOT_FOUND"
    assert exc.details == {"resource_type": "template", "resource_id": "tpl1"}


def test_get_user_message() -> None:
    assert get_user_message("NOT_FOUND") == USER_MESSAGES["NOT_FOUND"]
    assert get_user_message("NOT_FOUND", "custom") == "custom"
    assert get_user_message("NOPE") == "An unexpected error occurred."


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (ValidationException("x"), 400),
        (MalformedContentException("x"), 400),
        (SlugConflictException("x"), 409),
        (TemplateNotFoundException("x"), 404),
        (SqlNotConfiguredException(), 503),
        (CrmTemplatesException("x"), 400),
    ],
)
def test_status_mapping(exc: CrmTemplatesException, status: int) -> None:
    assert status_for_error_code(exc.error_code) == status
