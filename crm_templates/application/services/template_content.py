"""Template content versioning: parse and serialize the {version, fields} envelope.

Content is persisted as a JSON string. Reading applies backward-compatible
defaults (a missing "version" means 1, a missing "fields" means none) and
validates every field through the field schema validator. Validation is
all-or-nothing: one bad field rejects the whole envelope.

Two read APIs share the same rules:

* read_content keeps the three outcomes apart (ContentEmpty, ContentCorrupt,
  ContentOk) so callers can tell a brand-new template from a damaged one.
* parse_content collapses them to a plain list ([] for empty and corrupt)
  and logs corrupt content.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from crm_templates.application.services.field_schema_validator import (
    ValidationFailure,
    validate_fields,
)
from crm_templates.core.constants import CONTENT_VERSION, MAX_FIELDS_PER_TEMPLATE
from crm_templates.domain.entities import FieldDefinition, TemplateContent
from crm_templates.domain.exceptions import MalformedContentException
from crm_templates.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

MALFORMED_CONTENT = "MALFORMED_CONTENT"
VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class ContentEmpty:
    """No content yet: None, empty, or whitespace-only string."""

    @property
    def fields(self) -> list[FieldDefinition]:
        return []


@dataclass(frozen=True)
class ContentCorrupt:
    """Content present but unusable.

    error_code is MALFORMED_CONTENT (not JSON, or not a JSON object) or
    VALIDATION_ERROR (envelope or a field broke a structural rule, with
    the failure attached).
    """

    error_code: str
    reason: str
    failure: ValidationFailure | None = None

    @property
    def fields(self) -> list[FieldDefinition]:
        return []


@dataclass(frozen=True)
class ContentOk:
    """Fully valid content."""

    content: TemplateContent

    @property
    def fields(self) -> list[FieldDefinition]:
        return list(self.content.fields)


ContentReadResult = ContentEmpty | ContentCorrupt | ContentOk


def _read_version(data: dict[str, Any]) -> int | ValidationFailure:
    # Content written before versioning has no "version" key.
    version = data.get("version", CONTENT_VERSION)
    if isinstance(version, float) and version.is_integer():
        version = int(version)
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        return ValidationFailure(("version",), "Version must be a positive integer")
    return version


def decode_envelope(data: dict[str, Any]) -> TemplateContent | ValidationFailure:
    """Validate a decoded envelope object and build TemplateContent."""
    version = _read_version(data)
    if isinstance(version, ValidationFailure):
        return version
    raw_fields = data.get("fields", [])
    if not isinstance(raw_fields, list):
        return ValidationFailure(("fields",), "Fields must be a list")
    if len(raw_fields) > MAX_FIELDS_PER_TEMPLATE:
        return ValidationFailure(
            ("fields",),
            f"A template cannot contain more than {MAX_FIELDS_PER_TEMPLATE} fields",
        )
    fields = validate_fields(raw_fields)
    if isinstance(fields, ValidationFailure):
        return fields.prefixed("fields")
    return TemplateContent(version=version, fields=tuple(fields))


def read_content(raw: str | None) -> ContentReadResult:
    """Read stored content, keeping empty, corrupt, and valid outcomes distinct.

    Args:
        raw: Persisted content string, or None.

    Returns:
        ContentEmpty, ContentCorrupt (with code and reason), or ContentOk.
    """
    if raw is None or not raw.strip():
        return ContentEmpty()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return ContentCorrupt(MALFORMED_CONTENT, f"Content is not valid JSON: {e.msg}")
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and pathologically deep nesting.
        return ContentCorrupt(MALFORMED_CONTENT, f"Content cannot be decoded: {e}")
    if not isinstance(data, dict):
        return ContentCorrupt(MALFORMED_CONTENT, "Content must be a JSON object")
    result = decode_envelope(data)
    if isinstance(result, ValidationFailure):
        return ContentCorrupt(
            VALIDATION_ERROR,
            f"{result.location}: {result.reason}" if result.location else result.reason,
            failure=result,
        )
    return ContentOk(result)


def parse_content(raw: str | None) -> list[FieldDefinition]:
    """Parse stored content into field definitions.

    Empty and corrupt content both yield []; corrupt content is logged, never
    repaired or partially returned. Use read_content to tell them apart.
    """
    result = read_content(raw)
    if isinstance(result, ContentCorrupt):
        logger.error(
            "Template content rejected (%s): %s; returning no fields",
            result.error_code,
            result.reason,
        )
    return result.fields


def require_fields(raw: str | None) -> list[FieldDefinition]:
    """Write-path read: empty content gives [], corrupt content raises.

    Raises:
        MalformedContentException: Content is not JSON or not a JSON object.
        ValidationException: Envelope or a field broke a structural rule.
    """
    result = read_content(raw)
    if isinstance(result, ContentCorrupt):
        if result.failure is not None:
            raise result.failure.to_exception()
        raise MalformedContentException(result.reason)
    return result.fields


def serialize_content(fields: Iterable[FieldDefinition]) -> str:
    """Serialize fields into the current envelope, compact JSON.

    Example:
        serialize_content([FieldDefinition(name="poste", type=FieldType.TEXT)])
        -> '{"version":1,"fields":[{"field_name":"poste","field_type":"text","required":false}]}'
    """
    envelope = TemplateContent(version=CONTENT_VERSION, fields=tuple(fields))
    return json.dumps(envelope.to_wire(), separators=(",", ":"), ensure_ascii=False)


def assign_missing_ids(fields: Sequence[FieldDefinition]) -> list[FieldDefinition]:
    """Give every field without an id a new CUID; fields with an id are kept as-is."""
    return [f if f.id else f.with_id(generate_cuid()) for f in fields]
