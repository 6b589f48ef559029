"""Annotates template fields with the business key of their placeholder.

Given the business config of a template kind, each field gets
meta.businessKey when its placeholder token is found in the config table.
Enrichment is best-effort: no match leaves the field untouched and is not an
error. Required placeholders are not checked here (see validate_offer_input).
"""

from __future__ import annotations

from collections.abc import Mapping

from crm_templates.application.services.business_config import (
    TEMPLATE_CONFIGS,
    BusinessConfig,
)
from crm_templates.core.constants import (
    META_BUSINESS_KEY,
    META_PLACEHOLDER_RAW,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from crm_templates.domain.entities import FieldDefinition
from crm_templates.domain.enums import TemplateKind


def placeholder_token(name: str) -> str:
    """Wrap a field name in placeholder delimiters: 'poste' -> '{{poste}}'."""
    return f"{PLACEHOLDER_OPEN}{name}{PLACEHOLDER_CLOSE}"


class BusinessKeyEnricher:
    """Maps fields to business keys using an injected per-kind config table."""

    def __init__(
        self, configs: Mapping[TemplateKind, BusinessConfig] = TEMPLATE_CONFIGS
    ) -> None:
        self._configs = configs

    def config_for(self, category: TemplateKind | str | None) -> BusinessConfig | None:
        """Return the config with a non-empty placeholder table for category, else None."""
        kind = (
            category
            if isinstance(category, TemplateKind)
            else TemplateKind.from_category(category)
        )
        if kind is None:
            return None
        config = self._configs.get(kind)
        if config is None or not config.placeholders:
            return None
        return config

    def enrich(
        self, fields: list[FieldDefinition], category: TemplateKind | str | None
    ) -> list[FieldDefinition]:
        """Return fields with meta.businessKey set where a placeholder matches.

        Unknown categories and categories without placeholders return the
        given list object itself. Otherwise a new list is returned in which
        unmatched fields, and fields that already carry a business key, are
        the input objects.
        """
        config = self.config_for(category)
        if config is None:
            return fields
        return [self._enrich_field(f, config) for f in fields]

    @staticmethod
    def _enrich_field(field: FieldDefinition, config: BusinessConfig) -> FieldDefinition:
        if field.business_key:
            return field
        raw_token = field.placeholder_raw
        if raw_token:
            mapping = config.lookup(raw_token)
            if mapping:
                return field.with_meta(**{META_BUSINESS_KEY: mapping.business_key})
        token = placeholder_token(field.name)
        mapping = config.lookup(token)
        if mapping:
            return field.with_meta(
                **{
                    META_PLACEHOLDER_RAW: token,
                    META_BUSINESS_KEY: mapping.business_key,
                }
            )
        return field
