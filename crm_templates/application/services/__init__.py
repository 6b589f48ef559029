"""Application services: field validation, content versioning, business keys, slugs."""

from crm_templates.application.services.business_config import (
    TEMPLATE_CONFIGS,
    BusinessConfig,
    OfferInputValidation,
    PlaceholderMapping,
    get_all_placeholders,
    get_required_placeholders,
    get_template_config,
    has_template_config,
    validate_offer_input,
)
from crm_templates.application.services.business_key_enricher import (
    BusinessKeyEnricher,
)
from crm_templates.application.services.field_schema_validator import (
    ValidationFailure,
    validate_field,
)
from crm_templates.application.services.slug_arbiter import SlugArbiter, slugify
from crm_templates.application.services.template_content import (
    ContentCorrupt,
    ContentEmpty,
    ContentOk,
    parse_content,
    read_content,
    serialize_content,
)

__all__ = [
    "BusinessConfig",
    "BusinessKeyEnricher",
    "ContentCorrupt",
    "ContentEmpty",
    "ContentOk",
    "OfferInputValidation",
    "PlaceholderMapping",
    "SlugArbiter",
    "TEMPLATE_CONFIGS",
    "ValidationFailure",
    "get_all_placeholders",
    "get_required_placeholders",
    "get_template_config",
    "has_template_config",
    "parse_content",
    "read_content",
    "serialize_content",
    "slugify",
    "validate_field",
    "validate_offer_input",
]
