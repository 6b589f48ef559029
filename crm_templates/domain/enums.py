"""Domain enumerations for template definitions.

Enums represent closed sets of domain values (field types, template kinds).
"""

from enum import Enum


class FieldType(str, Enum):
    """Form field type of a template field definition (wire key: field_type)."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    TEXTAREA = "textarea"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid field type values as strings.

        Returns:
            List of enum value strings (e.g. for error messages).
        """
        return [field_type.value for field_type in cls]


class TemplateKind(str, Enum):
    """Template category selecting the business configuration that applies.

    GENERIC carries no placeholder mapping and is the fallback for any
    category string that is not a member of this enum.
    """

    GENERIC = "GENERIC"
    CDI_CADRE = "CDI_CADRE"
    CDD_SAISONNIER = "CDD_SAISONNIER"
    AVENANT_TEMPS_PARTIEL = "AVENANT_TEMPS_PARTIEL"
    PROMESSE_EMBAUCHE = "PROMESSE_EMBAUCHE"

    @classmethod
    def values(cls) -> list[str]:
        """Return all template kind values as strings."""
        return [kind.value for kind in cls]

    @classmethod
    def from_category(cls, category: str | None) -> "TemplateKind | None":
        """Return the kind named by category, or None when it is not a known kind."""
        if not category:
            return None
        try:
            return cls(category)
        except ValueError:
            return None
