"""Template use cases: create, update, duplicate, reset structure, read structure.

Every write re-validates content (all-or-nothing) and replaces the whole
envelope. Creation resolves a tenant-unique slug through SlugArbiter and
retries the insert, with a fresh random suffix, when the (tenant_id, slug)
constraint still rejects it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from crm_templates.application.dtos.template import TemplateResult
from crm_templates.application.interfaces.repositories import ITemplateRepository
from crm_templates.application.services.business_key_enricher import (
    BusinessKeyEnricher,
)
from crm_templates.application.services.slug_arbiter import (
    SlugArbiter,
    current_time_millis,
    slugify,
)
from crm_templates.application.services.template_content import (
    ContentReadResult,
    assign_missing_ids,
    read_content,
    require_fields,
    serialize_content,
)
from crm_templates.core.constants import MAX_SLUG_CANDIDATE_LENGTH, MAX_TITLE_LENGTH
from crm_templates.domain.enums import TemplateKind
from crm_templates.domain.exceptions import SlugConflictException, ValidationException

logger = logging.getLogger(__name__)

DEFAULT_SLUG_INSERT_ATTEMPTS = 3


def _require_text(value: str, field: str, max_length: int) -> str:
    """Return value stripped; raise ValidationException when blank or too long."""
    stripped = value.strip() if isinstance(value, str) else ""
    if not stripped:
        raise ValidationException(f"{field.capitalize()} is required", field=field)
    if len(stripped) > max_length:
        raise ValidationException(
            f"{field.capitalize()} cannot exceed {max_length} characters", field=field
        )
    return stripped


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit].rstrip()


def _clean_tags(tags: list[str] | None) -> list[str]:
    return [t.strip() for t in tags or [] if t and t.strip()]


def _content_for_write(content: str | None) -> str:
    """Validate content and return the normalized envelope (ids assigned)."""
    fields = require_fields(content)
    return serialize_content(assign_missing_ids(fields))


class CreateTemplateUseCase:
    """Creates a template: validate content, enrich per category, arbitrate slug, insert."""

    def __init__(
        self,
        template_repo: ITemplateRepository,
        slug_arbiter: SlugArbiter | None = None,
        enricher: BusinessKeyEnricher | None = None,
        *,
        max_attempts: int = DEFAULT_SLUG_INSERT_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._repo = template_repo
        self._arbiter = slug_arbiter or SlugArbiter(template_repo)
        self._enricher = enricher or BusinessKeyEnricher()
        self._max_attempts = max_attempts

    async def execute(
        self,
        tenant_id: str,
        title: str,
        slug: str,
        content: str | None = None,
        *,
        category: str | None = None,
        tags: list[str] | None = None,
    ) -> TemplateResult:
        """Create a template from a candidate slug and raw content.

        Args:
            tenant_id: Tenant id.
            title: Template title.
            slug: Candidate slug; the stored slug may carry a suffix.
            content: Raw content JSON (empty/None means no fields yet).
            category: Template kind; unknown or empty categories get no enrichment.
            tags: Optional tags.

        Returns:
            Created template.

        Raises:
            ValidationException: Blank title/slug or invalid content structure.
            MalformedContentException: Content is not a JSON object.
            SlugConflictException: Every insert attempt hit the unique constraint.
        """
        title = _require_text(title, "title", MAX_TITLE_LENGTH)
        slug = _require_text(slug, "slug", MAX_SLUG_CANDIDATE_LENGTH)
        category = (category or "").strip() or TemplateKind.GENERIC.value
        fields = require_fields(content)
        fields = self._enricher.enrich(fields, category)
        serialized = serialize_content(assign_missing_ids(fields))
        return await self.insert_with_unique_slug(
            tenant_id,
            title=title,
            slug=slug,
            content=serialized,
            category=category,
            tags=_clean_tags(tags),
        )

    async def insert_with_unique_slug(
        self,
        tenant_id: str,
        *,
        title: str,
        slug: str,
        content: str,
        category: str,
        tags: list[str],
    ) -> TemplateResult:
        """Arbitrate a slug and insert, retrying on unique-constraint conflicts.

        Attempt 1 arbitrates the candidate itself; each retry arbitrates
        candidate-<random token> so concurrent writers diverge.
        """
        candidate = slug
        for attempt in range(self._max_attempts):
            resolved = await self._arbiter.ensure_unique_slug(candidate, tenant_id)
            try:
                created = await self._repo.insert(
                    tenant_id=tenant_id,
                    title=title,
                    slug=resolved,
                    content=content,
                    category=category,
                    tags=tags,
                )
            except SlugConflictException:
                if attempt == self._max_attempts - 1:
                    logger.error(
                        "Slug %r still conflicting in tenant %s after %d attempts",
                        resolved,
                        tenant_id,
                        self._max_attempts,
                    )
                    raise
                logger.warning(
                    "Slug %r conflicted on insert in tenant %s (attempt %d/%d); retrying",
                    resolved,
                    tenant_id,
                    attempt + 1,
                    self._max_attempts,
                )
                candidate = f"{slug}-{self._arbiter.fresh_token()}"
                continue
            logger.info(
                "Created template %s with slug %r in tenant %s",
                created.id,
                created.slug,
                tenant_id,
            )
            return created
        raise RuntimeError("insert_with_unique_slug exhausted retries")  # unreachable


class UpdateTemplateUseCase:
    """Updates title, content, category or tags; content is re-validated and replaced whole."""

    def __init__(self, template_repo: ITemplateRepository) -> None:
        self._repo = template_repo

    async def execute(
        self,
        template_id: str,
        tenant_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
    ) -> TemplateResult:
        """Apply a partial update. None leaves an attribute unchanged.

        Raises:
            ValidationException: Blank title or invalid content structure.
            MalformedContentException: Content is not a JSON object.
            TemplateNotFoundException: No such template in tenant.
        """
        if title is not None:
            title = _require_text(title, "title", MAX_TITLE_LENGTH)
        if content is not None:
            content = _content_for_write(content)
        if category is not None:
            category = category.strip() or TemplateKind.GENERIC.value
        return await self._repo.update(
            template_id,
            tenant_id,
            title=title,
            content=content,
            category=category,
            tags=_clean_tags(tags) if tags is not None else None,
        )


class DuplicateTemplateUseCase:
    """Copies a template under '<title> (copy)' and a new tenant-unique slug."""

    def __init__(
        self, template_repo: ITemplateRepository, create_use_case: CreateTemplateUseCase
    ) -> None:
        self._repo = template_repo
        self._create = create_use_case

    async def execute(self, template_id: str, tenant_id: str) -> TemplateResult:
        """Duplicate template_id; content, category and tags are copied verbatim.

        Raises:
            TemplateNotFoundException: No such template in tenant.
            SlugConflictException: Every insert attempt hit the unique constraint.
        """
        source = await self._repo.find_by_id(template_id, tenant_id)
        title_suffix = " (copy)"
        title = _truncate(source.title, MAX_TITLE_LENGTH - len(title_suffix)) + title_suffix
        slug_suffix = f"-copy-{current_time_millis()}"
        base = slugify(source.title)[: MAX_SLUG_CANDIDATE_LENGTH - len(slug_suffix)]
        base = base.rstrip("-") or "template"
        return await self._create.insert_with_unique_slug(
            tenant_id,
            title=title,
            slug=f"{base}{slug_suffix}",
            content=source.content,
            category=source.category,
            tags=list(source.tags),
        )


class ResetTemplateStructureUseCase:
    """Replaces a template's content with an empty envelope (e.g. after corruption)."""

    def __init__(self, template_repo: ITemplateRepository) -> None:
        self._repo = template_repo

    async def execute(self, template_id: str, tenant_id: str) -> TemplateResult:
        """Raises TemplateNotFoundException when the template is not in tenant."""
        logger.info("Resetting structure of template %s in tenant %s", template_id, tenant_id)
        return await self._repo.update(
            template_id, tenant_id, content=serialize_content([])
        )


@dataclass(frozen=True)
class TemplateStructure:
    """A template together with the outcome of reading its content."""

    template: TemplateResult
    content: ContentReadResult


class GetTemplateStructureUseCase:
    """Loads a template and reads its content without collapsing empty and corrupt."""

    def __init__(self, template_repo: ITemplateRepository) -> None:
        self._repo = template_repo

    async def execute(self, template_id: str, tenant_id: str) -> TemplateStructure:
        template = await self._repo.find_by_id(template_id, tenant_id)
        return TemplateStructure(template=template, content=read_content(template.content))
