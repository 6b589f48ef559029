"""Field schema validation for template field definitions.

Validates one decoded JSON value (a field in wire form) and returns either a
normalized FieldDefinition or a ValidationFailure naming the offending path.
Malformed data never raises; the first structural violation wins and nothing
is coerced. The only implicit default is required=False. Unknown keys are
dropped.

Options rules depend on the field type: each FieldType has its own options
validator in _OPTIONS_VALIDATORS, so adding a type forces a decision here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from crm_templates.core.constants import (
    MAX_FIELD_NAME_LENGTH,
    MAX_OPTION_LENGTH,
    MAX_SELECT_OPTIONS,
)
from crm_templates.domain.entities import FieldDefinition
from crm_templates.domain.enums import FieldType
from crm_templates.domain.exceptions import ValidationException

Path = tuple[str | int, ...]


@dataclass(frozen=True)
class ValidationFailure:
    """Structured validation failure: where (path) and why (reason)."""

    path: Path
    reason: str

    @property
    def location(self) -> str:
        """Dotted/indexed rendering of path, e.g. 'fields[3].options[0]' ('' for the root)."""
        rendered = ""
        for part in self.path:
            if isinstance(part, int):
                rendered += f"[{part}]"
            elif rendered:
                rendered += f".{part}"
            else:
                rendered = part
        return rendered

    def prefixed(self, *prefix: str | int) -> ValidationFailure:
        """Return the same failure located under prefix (e.g. 'fields', 3)."""
        return ValidationFailure(path=(*prefix, *self.path), reason=self.reason)

    def to_exception(self) -> ValidationException:
        """Convert to the exception raised by write paths."""
        return ValidationException(self.reason, field=self.location or None)


def _optional_string(raw: dict[str, Any], key: str, label: str) -> ValidationFailure | None:
    """Fail when key is present but not a string (JSON null included)."""
    if key in raw and not isinstance(raw[key], str):
        return ValidationFailure((key,), f"{label} must be a string")
    return None


def _validate_name(raw: dict[str, Any]) -> ValidationFailure | None:
    name = raw.get("field_name")
    if not isinstance(name, str) or not name:
        return ValidationFailure(("field_name",), "Field name is required")
    if len(name) > MAX_FIELD_NAME_LENGTH:
        return ValidationFailure(
            ("field_name",),
            f"Field name cannot exceed {MAX_FIELD_NAME_LENGTH} characters",
        )
    return None


def _parse_type(raw: dict[str, Any]) -> FieldType | ValidationFailure:
    value = raw.get("field_type")
    if isinstance(value, str):
        try:
            return FieldType(value)
        except ValueError:
            pass
    return ValidationFailure(
        ("field_type",),
        f"Invalid field type (expected one of: {', '.join(FieldType.values())})",
    )


def _validate_option_list(options: Any) -> ValidationFailure | None:
    """Shape and limits of an options list, independent of field type."""
    if not isinstance(options, list):
        return ValidationFailure(("options",), "Options must be a list of strings")
    if len(options) > MAX_SELECT_OPTIONS:
        return ValidationFailure(
            ("options",),
            f"A select field cannot have more than {MAX_SELECT_OPTIONS} options",
        )
    for index, option in enumerate(options):
        if not isinstance(option, str):
            return ValidationFailure(("options", index), "Option must be a string")
        if len(option) < 1:
            return ValidationFailure(("options", index), "An option cannot be empty")
        if len(option) > MAX_OPTION_LENGTH:
            return ValidationFailure(
                ("options", index),
                f"An option cannot exceed {MAX_OPTION_LENGTH} characters",
            )
    return None


def _validate_select_options(raw: dict[str, Any]) -> ValidationFailure | None:
    """Select fields need a non-empty options list."""
    options = raw.get("options")
    if "options" in raw:
        failure = _validate_option_list(options)
        if failure:
            return failure
    if not options:
        return ValidationFailure(
            ("options",), "Fields of type 'select' must have at least one option"
        )
    return None


def _validate_free_options(raw: dict[str, Any]) -> ValidationFailure | None:
    """Non-select fields may carry options; when present they obey the same limits."""
    if "options" not in raw:
        return None
    return _validate_option_list(raw["options"])


_OPTIONS_VALIDATORS: dict[FieldType, Callable[[dict[str, Any]], ValidationFailure | None]] = {
    FieldType.TEXT: _validate_free_options,
    FieldType.NUMBER: _validate_free_options,
    FieldType.DATE: _validate_free_options,
    FieldType.SELECT: _validate_select_options,
    FieldType.TEXTAREA: _validate_free_options,
}


def validate_field(raw: Any) -> FieldDefinition | ValidationFailure:
    """Validate one field definition in wire form.

    Args:
        raw: Any decoded JSON value.

    Returns:
        A normalized FieldDefinition (required defaulted to False, unknown keys
        dropped), or a ValidationFailure whose path is relative to the field.
    """
    if not isinstance(raw, dict):
        return ValidationFailure((), "Field definition must be an object")

    failure = _optional_string(raw, "id", "Field id") or _validate_name(raw)
    if failure:
        return failure
    field_type = _parse_type(raw)
    if isinstance(field_type, ValidationFailure):
        return field_type
    failure = _optional_string(raw, "placeholder", "Placeholder")
    if failure:
        return failure
    required = raw.get("required", False)
    if not isinstance(required, bool):
        return ValidationFailure(("required",), "Required must be a boolean")
    failure = _OPTIONS_VALIDATORS[field_type](raw)
    if failure:
        return failure
    meta = raw.get("meta")
    if "meta" in raw and not isinstance(meta, dict):
        return ValidationFailure(("meta",), "Meta must be an object")

    options = raw.get("options")
    return FieldDefinition(
        id=raw.get("id"),
        name=raw["field_name"],
        type=field_type,
        placeholder=raw.get("placeholder"),
        required=required,
        options=tuple(options) if options is not None else None,
        meta=dict(meta) if meta is not None else None,
    )


def validate_fields(raw_fields: list[Any]) -> list[FieldDefinition] | ValidationFailure:
    """Validate every entry of a fields list; all-or-nothing.

    Returns:
        All definitions in order, or the first failure located under its index.
    """
    fields: list[FieldDefinition] = []
    for index, raw in enumerate(raw_fields):
        result = validate_field(raw)
        if isinstance(result, ValidationFailure):
            return result.prefixed(index)
        fields.append(result)
    return fields
