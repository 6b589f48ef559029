"""Field definition and content envelope value types.

A template's content is a versioned envelope of ordered field definitions.
Both types are immutable; edits produce new instances via dataclasses.replace.
Structural rules are enforced by the field schema validator, not here.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from crm_templates.core.constants import (
    CONTENT_VERSION,
    META_BUSINESS_KEY,
    META_PLACEHOLDER_RAW,
)
from crm_templates.domain.enums import FieldType


@dataclass(frozen=True)
class FieldDefinition:
    """One form field of a template.

    Python attribute names differ from the wire keys for name and type
    (field_name, field_type); to_wire() produces the persisted mapping.
    options and meta are None when absent on the wire, which keeps
    serialization an exact inverse of parsing. meta is exposed read-only and
    is left out of the hash.
    """

    name: str
    type: FieldType
    required: bool = False
    id: str | None = None
    placeholder: str | None = None
    options: tuple[str, ...] | None = None
    meta: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.meta is not None:
            object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @property
    def placeholder_raw(self) -> str | None:
        """Raw placeholder token from the source document (meta.placeholderRaw), if a string."""
        value = (self.meta or {}).get(META_PLACEHOLDER_RAW)
        return value if isinstance(value, str) else None

    @property
    def business_key(self) -> str | None:
        """Business key this field maps to (meta.businessKey), if set to a non-empty value."""
        value = (self.meta or {}).get(META_BUSINESS_KEY)
        return value if value else None

    def with_meta(self, **updates: Any) -> "FieldDefinition":
        """Return a copy whose meta is the current meta merged with updates."""
        return replace(self, meta={**(self.meta or {}), **updates})

    def with_id(self, field_id: str) -> "FieldDefinition":
        """Return a copy carrying the given id."""
        return replace(self, id=field_id)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready mapping in wire key order.

        Order: id, field_name, field_type, placeholder, required, options, meta.
        Absent optionals are omitted; required is always written.
        """
        wire: dict[str, Any] = {}
        if self.id is not None:
            wire["id"] = self.id
        wire["field_name"] = self.name
        wire["field_type"] = self.type.value
        if self.placeholder is not None:
            wire["placeholder"] = self.placeholder
        wire["required"] = self.required
        if self.options is not None:
            wire["options"] = list(self.options)
        if self.meta is not None:
            wire["meta"] = dict(self.meta)
        return wire


@dataclass(frozen=True)
class TemplateContent:
    """Versioned envelope persisted as a template's content."""

    version: int = CONTENT_VERSION
    fields: tuple[FieldDefinition, ...] = field(default_factory=tuple)

    def to_wire(self) -> dict[str, Any]:
        """Return {"version", "fields"} with fields in wire form."""
        return {
            "version": self.version,
            "fields": [f.to_wire() for f in self.fields],
        }
