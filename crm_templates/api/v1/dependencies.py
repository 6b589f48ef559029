"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the tenant id, the template repository and the
template use cases. Routes depend only on these, never on infrastructure
directly; tests override get_template_repo / get_template_repo_for_write.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from crm_templates.application.interfaces.repositories import ITemplateRepository
from crm_templates.application.services.business_key_enricher import (
    BusinessKeyEnricher,
)
from crm_templates.application.services.slug_arbiter import SlugArbiter
from crm_templates.application.use_cases.templates import (
    CreateTemplateUseCase,
    DuplicateTemplateUseCase,
    GetTemplateStructureUseCase,
    ResetTemplateStructureUseCase,
    UpdateTemplateUseCase,
)
from crm_templates.core.config import get_settings
from crm_templates.core.tenant_validation import is_valid_tenant_id_format
from crm_templates.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from crm_templates.infrastructure.persistence.repositories import TemplateRepository


def get_tenant_id(request: Request) -> str:
    """Resolve tenant ID from the configured header and check its format.

    The surrounding CRM authenticates the caller; the id is trusted as given.
    """
    name = get_settings().tenant_header_name
    value = request.headers.get(name)
    if not value:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required header: {name}",
        )
    if not is_valid_tenant_id_format(value):
        raise HTTPException(
            status_code=400,
            detail="Invalid tenant ID format (use alphanumeric, hyphen, underscore; max 64 characters)",
        )
    return value


async def get_template_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ITemplateRepository:
    """Template repository for read operations."""
    return TemplateRepository(db)


async def get_template_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ITemplateRepository:
    """Template repository for create/update (request-scoped transaction)."""
    return TemplateRepository(db)


def get_create_template_use_case(
    repo: Annotated[ITemplateRepository, Depends(get_template_repo_for_write)],
) -> CreateTemplateUseCase:
    """Create use case with default business configs and settings-bound retries."""
    return CreateTemplateUseCase(
        repo,
        SlugArbiter(repo),
        BusinessKeyEnricher(),
        max_attempts=get_settings().slug_insert_max_attempts,
    )


def get_update_template_use_case(
    repo: Annotated[ITemplateRepository, Depends(get_template_repo_for_write)],
) -> UpdateTemplateUseCase:
    return UpdateTemplateUseCase(repo)


def get_duplicate_template_use_case(
    repo: Annotated[ITemplateRepository, Depends(get_template_repo_for_write)],
    create: Annotated[CreateTemplateUseCase, Depends(get_create_template_use_case)],
) -> DuplicateTemplateUseCase:
    return DuplicateTemplateUseCase(repo, create)


def get_reset_template_structure_use_case(
    repo: Annotated[ITemplateRepository, Depends(get_template_repo_for_write)],
) -> ResetTemplateStructureUseCase:
    return ResetTemplateStructureUseCase(repo)


def get_template_structure_use_case(
    repo: Annotated[ITemplateRepository, Depends(get_template_repo)],
) -> GetTemplateStructureUseCase:
    return GetTemplateStructureUseCase(repo)
