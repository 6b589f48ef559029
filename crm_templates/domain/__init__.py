"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from crm_templates.domain.entities import FieldDefinition, TemplateContent
from crm_templates.domain.enums import FieldType, TemplateKind
from crm_templates.domain.exceptions import (
    CrmTemplatesException,
    MalformedContentException,
    SlugConflictException,
    SqlNotConfiguredException,
    TemplateNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "FieldDefinition",
    "TemplateContent",
    # Enums
    "FieldType",
    "TemplateKind",
    # Exceptions
    "CrmTemplatesException",
    "MalformedContentException",
    "SlugConflictException",
    "SqlNotConfiguredException",
    "TemplateNotFoundException",
    "ValidationException",
]
