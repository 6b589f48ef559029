"""Template repository. Returns application DTOs; all access is tenant-scoped."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm_templates.application.dtos.template import TemplateResult
from crm_templates.domain.exceptions import (
    SlugConflictException,
    TemplateNotFoundException,
)
from crm_templates.infrastructure.persistence.models.template import (
    UQ_TEMPLATE_TENANT_SLUG,
    Template,
)
from crm_templates.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _to_result(t: Template) -> TemplateResult:
    """Map ORM to TemplateResult."""
    return TemplateResult(
        id=t.id,
        tenant_id=t.tenant_id,
        title=t.title,
        slug=t.slug,
        content=t.content or "",
        category=t.category,
        tags=list(t.tags or []),
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


def _is_slug_violation(exc: IntegrityError) -> bool:
    """True when the IntegrityError comes from the (tenant_id, slug) constraint.

    Postgres names the constraint; other backends name the columns.
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    if UQ_TEMPLATE_TENANT_SLUG in message:
        return True
    return "unique" in message.lower() and "template.slug" in message


class TemplateRepository(BaseRepository[Template]):
    """Template repository implementing ITemplateRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Template)

    async def _get_row(self, template_id: str, tenant_id: str) -> Template:
        result = await self.db.execute(
            select(Template).where(
                Template.id == template_id,
                Template.tenant_id == tenant_id,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise TemplateNotFoundException(template_id)
        return row

    async def find_by_slug(self, tenant_id: str, slug: str) -> TemplateResult | None:
        """Return the tenant's template with this slug, or None."""
        result = await self.db.execute(
            select(Template).where(
                Template.tenant_id == tenant_id,
                Template.slug == slug,
            )
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def find_by_id(self, template_id: str, tenant_id: str) -> TemplateResult:
        """Return template by ID if it belongs to tenant; else TemplateNotFoundException."""
        return _to_result(await self._get_row(template_id, tenant_id))

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[TemplateResult]:
        """Return templates for tenant, newest first, with pagination."""
        result = await self.db.execute(
            select(Template)
            .where(Template.tenant_id == tenant_id)
            .order_by(Template.created_at.desc(), Template.id)
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def insert(
        self,
        tenant_id: str,
        title: str,
        slug: str,
        content: str,
        category: str,
        tags: list[str],
    ) -> TemplateResult:
        """Insert a template inside a savepoint.

        A unique violation on (tenant_id, slug) rolls back only the savepoint,
        so the caller's transaction stays usable for a retry.

        Raises:
            SlugConflictException: (tenant_id, slug) already exists.
        """
        t = Template(
            tenant_id=tenant_id,
            title=title,
            slug=slug,
            content=content,
            category=category,
            tags=list(tags),
        )
        try:
            async with self.db.begin_nested():
                created = await self.create(t)
        except IntegrityError as e:
            if not _is_slug_violation(e):
                raise
            logger.info("Insert rejected: slug %r exists in tenant %s", slug, tenant_id)
            raise SlugConflictException(slug) from e
        return _to_result(created)

    async def update(
        self,
        template_id: str,
        tenant_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
    ) -> TemplateResult:
        """Update the given attributes; None leaves an attribute unchanged.

        Raises:
            TemplateNotFoundException: No template with this id in tenant.
        """
        t = await self._get_row(template_id, tenant_id)
        if title is not None:
            t.title = title
        if content is not None:
            t.content = content
        if category is not None:
            t.category = category
        if tags is not None:
            t.tags = list(tags)
        return _to_result(await self.save(t))
