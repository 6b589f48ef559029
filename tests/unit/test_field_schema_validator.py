"""Tests for validate_field / validate_fields (structural rules, no coercion)."""

from typing import Any

import pytest

from crm_templates.application.services.field_schema_validator import (
    ValidationFailure,
    validate_field,
    validate_fields,
)
from crm_templates.domain.entities import FieldDefinition
from crm_templates.domain.enums import FieldType
from crm_templates.domain.exceptions import ValidationException


def _raw(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {"field_name": "poste", "field_type": "text"}
    raw.update(overrides)
    return raw


def test_minimal_text_field_defaults_required_false() -> None:
    """Only name and type given: required defaults to False, optionals stay absent."""
    result = validate_field(_raw())
    assert result == FieldDefinition(name="poste", type=FieldType.TEXT)
    assert result.required is False
    assert result.options is None
    assert result.meta is None


@pytest.mark.parametrize("field_type", FieldType.values())
def test_every_field_type_is_accepted(field_type: str) -> None:
    options = ["A"] if field_type == "select" else None
    raw = _raw(field_type=field_type)
    if options:
        raw["options"] = options
    result = validate_field(raw)
    assert isinstance(result, FieldDefinition)
    assert result.type == FieldType(field_type)


def test_full_field_is_normalized() -> None:
    raw = {
        "id": "f1",
        "field_name": "contrat",
        "field_type": "select",
        "placeholder": "Choisir",
        "required": True,
        "options": ["CDI", "CDD"],
        "meta": {"placeholderRaw": "{{contrat}}"},
    }
    result = validate_field(raw)
    assert result == FieldDefinition(
        id="f1",
        name="contrat",
        type=FieldType.SELECT,
        placeholder="Choisir",
        required=True,
        options=("CDI", "CDD"),
        meta={"placeholderRaw": "{{contrat}}"},
    )


def test_unknown_keys_are_dropped() -> None:
    result = validate_field(_raw(color="red", position=3))
    assert isinstance(result, FieldDefinition)
    assert "color" not in result.to_wire()
    assert "position" not in result.to_wire()


@pytest.mark.parametrize("value", [None, "poste", 3, [], True])
def test_non_object_fails_at_root(value: Any) -> None:
    result = validate_field(value)
    assert isinstance(result, ValidationFailure)
    assert result.path == ()
    assert result.location == ""


@pytest.mark.parametrize(
    "raw",
    [
        {"field_type": "text"},
        _raw(field_name=""),
        _raw(field_name=None),
        _raw(field_name=12),
        _raw(field_name="x" * 101),
    ],
)
def test_invalid_name_is_rejected(raw: dict[str, Any]) -> None:
    result = validate_field(raw)
    assert isinstance(result, ValidationFailure)
    assert result.location == "field_name"


def test_name_of_100_chars_is_accepted() -> None:
    assert isinstance(validate_field(_raw(field_name="x" * 100)), FieldDefinition)


@pytest.mark.parametrize("field_type", ["checkbox", "TEXT", "", None, 1])
def test_type_outside_closed_set_is_rejected(field_type: Any) -> None:
    result = validate_field(_raw(field_type=field_type))
    assert isinstance(result, ValidationFailure)
    assert result.location == "field_type"


@pytest.mark.parametrize("options", [None, [], "A,B"])
def test_select_without_usable_options_is_rejected(options: Any) -> None:
    raw = _raw(field_type="select")
    if options is not None:
        raw["options"] = options
    result = validate_field(raw)
    assert isinstance(result, ValidationFailure)
    assert result.location == "options"


def test_select_with_51_options_is_rejected_and_50_accepted() -> None:
    fifty = [f"opt{i}" for i in range(50)]
    assert isinstance(
        validate_field(_raw(field_type="select", options=fifty)), FieldDefinition
    )
    result = validate_field(_raw(field_type="select", options=[*fifty, "one-more"]))
    assert isinstance(result, ValidationFailure)
    assert result.location == "options"


@pytest.mark.parametrize(
    ("options", "location"),
    [
        (["A", ""], "options[1]"),
        (["x" * 101], "options[0]"),
        (["A", 2], "options[1]"),
    ],
)
def test_bad_option_is_located_by_index(options: list[Any], location: str) -> None:
    result = validate_field(_raw(field_type="select", options=options))
    assert isinstance(result, ValidationFailure)
    assert result.location == location


def test_options_on_non_select_field_obey_limits() -> None:
    assert isinstance(validate_field(_raw(options=["A"])), FieldDefinition)
    result = validate_field(_raw(options=[""]))
    assert isinstance(result, ValidationFailure)
    assert result.location == "options[0]"


@pytest.mark.parametrize("required", ["yes", 1, 0, None])
def test_required_must_be_boolean(required: Any) -> None:
    result = validate_field(_raw(required=required))
    assert isinstance(result, ValidationFailure)
    assert result.location == "required"


@pytest.mark.parametrize(
    ("key", "value"),
    [("id", None), ("id", 7), ("placeholder", None), ("placeholder", 3)],
)
def test_null_or_wrong_type_for_optional_string(key: str, value: Any) -> None:
    """JSON null is a type error, not 'absent'."""
    result = validate_field(_raw(**{key: value}))
    assert isinstance(result, ValidationFailure)
    assert result.location == key


@pytest.mark.parametrize("meta", [None, "x", ["a"]])
def test_meta_must_be_object(meta: Any) -> None:
    result = validate_field(_raw(meta=meta))
    assert isinstance(result, ValidationFailure)
    assert result.location == "meta"


def test_validate_fields_prefixes_index_of_first_failure() -> None:
    result = validate_fields([_raw(), _raw(field_name=""), _raw(field_type="nope")])
    assert isinstance(result, ValidationFailure)
    assert result.path == (1, "field_name")
    assert result.prefixed("fields").location == "fields[1].field_name"


def test_validate_fields_returns_all_in_order() -> None:
    result = validate_fields([_raw(field_name="a"), _raw(field_name="b")])
    assert [f.name for f in result] == ["a", "b"]


def test_failure_to_exception_carries_location() -> None:
    failure = ValidationFailure(("fields", 3, "options", 0), "An option cannot be empty")
    exc = failure.to_exception()
    assert isinstance(exc, ValidationException)
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.message == "An option cannot be empty"
    assert exc.details == {"field": "fields[3].options[0]"}
