"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from crm_templates.application.dtos.template import TemplateResult


class ITemplateRepository(Protocol):
    """Protocol for the tenant-scoped template repository (DIP).

    (tenant_id, slug) is unique; lookups by id are always tenant-scoped and
    a template of another tenant is reported exactly like a missing one.
    """

    async def find_by_slug(self, tenant_id: str, slug: str) -> TemplateResult | None:
        """Return the tenant's template with this slug, or None."""

    async def find_by_id(self, template_id: str, tenant_id: str) -> TemplateResult:
        """Return template by id in tenant. Raises TemplateNotFoundException."""

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[TemplateResult]:
        """Return the tenant's templates, newest first, with pagination."""

    async def insert(
        self,
        tenant_id: str,
        title: str,
        slug: str,
        content: str,
        category: str,
        tags: list[str],
    ) -> TemplateResult:
        """Insert a template. Raises SlugConflictException if (tenant_id, slug) exists."""

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
        """Update the given attributes (None = unchanged). Raises TemplateNotFoundException."""
