"""Application DTOs (no ORM dependency)."""

from crm_templates.application.dtos.template import TemplateResult

__all__ = ["TemplateResult"]
