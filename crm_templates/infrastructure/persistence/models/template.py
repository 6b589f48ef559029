"""Template ORM model. Slugs are unique per tenant."""

from typing import Any

from sqlalchemy import JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from crm_templates.core.constants import MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from crm_templates.domain.enums import TemplateKind
from crm_templates.infrastructure.persistence.database import Base
from crm_templates.infrastructure.persistence.models.mixins import MultiTenantModel

UQ_TEMPLATE_TENANT_SLUG = "uq_template_tenant_slug"


class Template(MultiTenantModel, Base):
    """Document template: title, tenant-unique slug, versioned field content (JSON text)."""

    __tablename__ = "template"

    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    slug: Mapped[str] = mapped_column(String(MAX_SLUG_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(64), nullable=False, default=TemplateKind.GENERIC.value
    )
    tags: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("tenant_id", "slug", name=UQ_TEMPLATE_TENANT_SLUG),
    )
