"""Business configuration per template kind.

Each TemplateKind has a static BusinessConfig: a label, a description, the
mapping of raw document placeholders (e.g. "{{nom_salarie}}") to business
keys (e.g. "employee.name"), and the rules an offer payload must satisfy for
that kind. GENERIC has no placeholders and is the fallback for unknown kinds.

The table is compiled in and read-only. Consumers receive it by injection
(see BusinessKeyEnricher); TEMPLATE_CONFIGS is the default instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from crm_templates.core.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from crm_templates.domain.enums import TemplateKind


@dataclass(frozen=True)
class PlaceholderMapping:
    """Business key a placeholder token maps to, and whether the kind requires it."""

    business_key: str
    required: bool


@dataclass(frozen=True)
class OfferInputRule:
    """One required value in an offer payload.

    path is dotted ("offer.salary.gross"); expected is str, float (any
    non-boolean number) or dict. Falsy values count as missing.
    """

    path: str
    expected: type
    message: str


@dataclass(frozen=True)
class OfferInputValidation:
    """Result of validate_offer_input."""

    ok: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class BusinessConfig:
    """Static business configuration of one template kind."""

    label: str
    description: str = ""
    placeholders: Mapping[str, PlaceholderMapping] = field(
        default_factory=lambda: MappingProxyType({})
    )
    offer_input_rules: tuple[OfferInputRule, ...] = ()

    def lookup(self, token: str) -> PlaceholderMapping | None:
        """Return the mapping for a raw placeholder token, or None."""
        return self.placeholders.get(token)


def _placeholders(**tokens: tuple[str, bool]) -> Mapping[str, PlaceholderMapping]:
    """Build a read-only table; keyword 'poste' becomes token '{{poste}}'."""
    return MappingProxyType(
        {
            PLACEHOLDER_OPEN + name + PLACEHOLDER_CLOSE: PlaceholderMapping(
                business_key=key, required=required
            )
            for name, (key, required) in tokens.items()
        }
    )


_EMPLOYEE_NAME = OfferInputRule("employee.name", str, "Employee last name is required")
_EMPLOYEE_FIRST_NAME = OfferInputRule(
    "employee.firstName", str, "Employee first name is required"
)
_POSITION_TITLE = OfferInputRule("offer.positionTitle", str, "Position title is required")
_GROSS_SALARY = OfferInputRule("offer.salary.gross", float, "Gross salary is required")


TEMPLATE_CONFIGS: Mapping[TemplateKind, BusinessConfig] = MappingProxyType(
    {
        TemplateKind.GENERIC: BusinessConfig(
            label="Template générique",
            description="Generic template without business-specific rules",
        ),
        TemplateKind.CDI_CADRE: BusinessConfig(
            label="CDI Cadre",
            description="Permanent contract for an executive position",
            placeholders=_placeholders(
                nom_salarie=("employee.name", True),
                prenom_salarie=("employee.firstName", True),
                poste=("offer.positionTitle", True),
                date_embauche=("offer.startDate", True),
                salaire_brut=("offer.salary.gross", True),
                salaire_net=("offer.salary.net", False),
                adresse_travail=("offer.workAddress", False),
            ),
            offer_input_rules=(
                _EMPLOYEE_NAME,
                _EMPLOYEE_FIRST_NAME,
                _POSITION_TITLE,
                OfferInputRule("offer.startDate", str, "Hiring date is required"),
                _GROSS_SALARY,
            ),
        ),
        TemplateKind.CDD_SAISONNIER: BusinessConfig(
            label="CDD Saisonnier",
            description="Fixed-term contract for seasonal work",
            placeholders=_placeholders(
                nom_salarie=("employee.name", True),
                prenom_salarie=("employee.firstName", True),
                poste=("offer.positionTitle", True),
                date_debut=("offer.startDate", True),
                date_fin=("offer.endDate", True),
                salaire_horaire=("offer.hourlyRate", True),
                heures_semaine=("offer.hoursPerWeek", False),
                saison=("offer.season", True),
            ),
            offer_input_rules=(
                _EMPLOYEE_NAME,
                _EMPLOYEE_FIRST_NAME,
                _POSITION_TITLE,
                OfferInputRule("offer.startDate", str, "Start date is required"),
                OfferInputRule("offer.endDate", str, "End date is required"),
                OfferInputRule("offer.hourlyRate", float, "Hourly rate is required"),
                OfferInputRule("offer.season", str, "Season is required"),
            ),
        ),
        TemplateKind.AVENANT_TEMPS_PARTIEL: BusinessConfig(
            label="Avenant Temps Partiel",
            description="Amendment switching a contract to part-time",
            placeholders=_placeholders(
                nom_salarie=("employee.name", True),
                date_effet=("amendment.effectiveDate", True),
                nouveau_temps_travail=("amendment.newWorkTime", True),
                ancien_temps_travail=("amendment.previousWorkTime", False),
            ),
            offer_input_rules=(
                _EMPLOYEE_NAME,
                OfferInputRule(
                    "amendment.effectiveDate", str, "Effective date is required"
                ),
                OfferInputRule(
                    "amendment.newWorkTime", str, "New working time is required"
                ),
            ),
        ),
        TemplateKind.PROMESSE_EMBAUCHE: BusinessConfig(
            label="Promesse d'embauche",
            description="Job offer letter sent before the final contract",
            placeholders=_placeholders(
                nom_salarie=("employee.name", True),
                prenom_salarie=("employee.firstName", True),
                poste=("offer.positionTitle", True),
                date_embauche_prevue=("offer.expectedStartDate", True),
                salaire_brut=("offer.salary.gross", True),
            ),
            offer_input_rules=(
                _EMPLOYEE_NAME,
                _EMPLOYEE_FIRST_NAME,
                _POSITION_TITLE,
                OfferInputRule(
                    "offer.expectedStartDate", str, "Expected start date is required"
                ),
                _GROSS_SALARY,
            ),
        ),
    }
)

_SECTION_MESSAGES = {
    "employee": "Employee information is required",
    "offer": "Offer information is required",
    "amendment": "Amendment information is required",
    "offer.salary": "Salary information is required",
}


def get_template_config(
    kind: TemplateKind | str | None,
    configs: Mapping[TemplateKind, BusinessConfig] = TEMPLATE_CONFIGS,
) -> BusinessConfig:
    """Return the config for kind, falling back to GENERIC for unknown kinds."""
    resolved = kind if isinstance(kind, TemplateKind) else TemplateKind.from_category(kind)
    if resolved is not None and resolved in configs:
        return configs[resolved]
    return configs[TemplateKind.GENERIC]


def has_template_config(
    kind: TemplateKind | str | None,
    configs: Mapping[TemplateKind, BusinessConfig] = TEMPLATE_CONFIGS,
) -> bool:
    """Return True if kind names a configured template kind."""
    resolved = kind if isinstance(kind, TemplateKind) else TemplateKind.from_category(kind)
    return resolved is not None and resolved in configs


def get_required_placeholders(kind: TemplateKind | str | None) -> list[str]:
    """Return the raw tokens the kind marks as required, in table order."""
    config = get_template_config(kind)
    return [token for token, mapping in config.placeholders.items() if mapping.required]


def get_all_placeholders(kind: TemplateKind | str | None) -> list[dict[str, Any]]:
    """Return every placeholder of the kind as {placeholder, businessKey, required}."""
    config = get_template_config(kind)
    return [
        {
            "placeholder": token,
            "businessKey": mapping.business_key,
            "required": mapping.required,
        }
        for token, mapping in config.placeholders.items()
    ]


def _matches(value: Any, expected: type) -> bool:
    if not value or isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def validate_offer_input(kind: TemplateKind | str | None, data: Any) -> OfferInputValidation:
    """Check an offer payload against the kind's required business values.

    A missing or non-object section (e.g. "employee") yields one section
    error and its keys are not checked individually.
    """
    if not isinstance(data, dict):
        return OfferInputValidation(ok=False, errors=("Data must be an object",))
    config = get_template_config(kind)
    errors: list[str] = []
    broken_sections: set[str] = set()
    for rule in config.offer_input_rules:
        parts = rule.path.split(".")
        node: Any = data
        for depth, key in enumerate(parts[:-1]):
            section = ".".join(parts[: depth + 1])
            if section in broken_sections:
                node = None
                break
            node = node.get(key) if isinstance(node, dict) else None
            if not isinstance(node, dict):
                broken_sections.add(section)
                errors.append(
                    _SECTION_MESSAGES.get(section, f"Section '{section}' is required")
                )
                node = None
                break
        if node is None:
            continue
        if not _matches(node.get(parts[-1]), rule.expected):
            errors.append(rule.message)
    return OfferInputValidation(ok=not errors, errors=tuple(errors))
