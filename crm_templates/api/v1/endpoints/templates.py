"""Template API: thin routes delegating to template use cases and repository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from crm_templates.api.v1.dependencies import (
    get_create_template_use_case,
    get_duplicate_template_use_case,
    get_reset_template_structure_use_case,
    get_template_repo,
    get_template_structure_use_case,
    get_tenant_id,
    get_update_template_use_case,
)
from crm_templates.application.interfaces.repositories import ITemplateRepository
from crm_templates.application.services.template_content import (
    ContentCorrupt,
    ContentOk,
)
from crm_templates.application.use_cases.templates import (
    CreateTemplateUseCase,
    DuplicateTemplateUseCase,
    GetTemplateStructureUseCase,
    ResetTemplateStructureUseCase,
    TemplateStructure,
    UpdateTemplateUseCase,
)
from crm_templates.schemas.template import (
    TemplateCreateRequest,
    TemplateResponse,
    TemplateStructureResponse,
    TemplateUpdateRequest,
)

router = APIRouter()


def _structure_response(structure: TemplateStructure) -> TemplateStructureResponse:
    template_id = structure.template.id
    content = structure.content
    if isinstance(content, ContentOk):
        return TemplateStructureResponse(
            template_id=template_id,
            status="ok",
            version=content.content.version,
            fields=[f.to_wire() for f in content.content.fields],
        )
    if isinstance(content, ContentCorrupt):
        return TemplateStructureResponse(
            template_id=template_id,
            status="corrupt",
            error_code=content.error_code,
            reason=content.reason,
        )
    return TemplateStructureResponse(template_id=template_id, status="empty")


@router.post("", response_model=TemplateResponse, status_code=201)
async def create_template(
    body: TemplateCreateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    use_case: Annotated[CreateTemplateUseCase, Depends(get_create_template_use_case)],
):
    """Create a template (tenant-scoped). The returned slug may differ from the candidate."""
    template = await use_case.execute(
        tenant_id,
        body.title,
        body.slug,
        body.content,
        category=body.category,
        tags=body.tags,
    )
    return TemplateResponse.model_validate(template)


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    repo: Annotated[ITemplateRepository, Depends(get_template_repo)],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    """List templates for tenant, newest first (paginated)."""
    templates = await repo.list_by_tenant(tenant_id, skip=skip, limit=limit)
    return [TemplateResponse.model_validate(t) for t in templates]


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    repo: Annotated[ITemplateRepository, Depends(get_template_repo)],
):
    """Get template by id (tenant-scoped)."""
    template = await repo.find_by_id(template_id, tenant_id)
    return TemplateResponse.model_validate(template)


@router.patch("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: str,
    body: TemplateUpdateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    use_case: Annotated[UpdateTemplateUseCase, Depends(get_update_template_use_case)],
):
    """Update title, content, category or tags. Content is re-validated and replaced whole."""
    template = await use_case.execute(
        template_id,
        tenant_id,
        title=body.title,
        content=body.content,
        category=body.category,
        tags=body.tags,
    )
    return TemplateResponse.model_validate(template)


@router.post("/{template_id}/duplicate", response_model=TemplateResponse, status_code=201)
async def duplicate_template(
    template_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    use_case: Annotated[
        DuplicateTemplateUseCase, Depends(get_duplicate_template_use_case)
    ],
):
    """Copy a template under '<title> (copy)' and a new slug."""
    template = await use_case.execute(template_id, tenant_id)
    return TemplateResponse.model_validate(template)


@router.post("/{template_id}/reset-structure", response_model=TemplateResponse)
async def reset_template_structure(
    template_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    use_case: Annotated[
        ResetTemplateStructureUseCase, Depends(get_reset_template_structure_use_case)
    ],
):
    """Replace the template content with an empty envelope."""
    template = await use_case.execute(template_id, tenant_id)
    return TemplateResponse.model_validate(template)


@router.get("/{template_id}/structure", response_model=TemplateStructureResponse)
async def get_template_structure(
    template_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    use_case: Annotated[
        GetTemplateStructureUseCase, Depends(get_template_structure_use_case)
    ],
):
    """Read the template content: empty, corrupt (with reason) or ok (with fields)."""
    return _structure_response(await use_case.execute(template_id, tenant_id))
