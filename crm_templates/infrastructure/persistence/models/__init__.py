"""ORM models. Import here so Base.metadata sees every table."""

from crm_templates.infrastructure.persistence.models.template import Template

__all__ = ["Template"]
