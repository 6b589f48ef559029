"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (template repository).
"""

from crm_templates.application.interfaces import ITemplateRepository
from crm_templates.application.services import (
    BusinessKeyEnricher,
    SlugArbiter,
    parse_content,
    serialize_content,
    validate_field,
)

__all__ = [
    "BusinessKeyEnricher",
    "ITemplateRepository",
    "SlugArbiter",
    "parse_content",
    "serialize_content",
    "validate_field",
]
