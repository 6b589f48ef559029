"""Domain entities and value types.

Pure domain models; no ORM or persistence concerns.
"""

from crm_templates.domain.entities.field_definition import (
    FieldDefinition,
    TemplateContent,
)

__all__ = [
    "FieldDefinition",
    "TemplateContent",
]
