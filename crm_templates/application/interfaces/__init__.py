"""Application interfaces (ports) implemented by infrastructure."""

from crm_templates.application.interfaces.repositories import ITemplateRepository

__all__ = ["ITemplateRepository"]
