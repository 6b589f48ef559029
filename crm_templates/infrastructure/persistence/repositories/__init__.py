"""Repository implementations (SQLAlchemy)."""

from crm_templates.infrastructure.persistence.repositories.template_repo import (
    TemplateRepository,
)

__all__ = ["TemplateRepository"]
