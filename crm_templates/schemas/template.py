"""Template API schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from crm_templates.core.constants import MAX_SLUG_CANDIDATE_LENGTH, MAX_TITLE_LENGTH


class TemplateCreateRequest(BaseModel):
    """Request body for creating a template.

    content is the raw envelope JSON string ({"version":1,"fields":[...]});
    empty or omitted means no fields yet. slug is a candidate: the stored
    slug may carry a suffix when the candidate is taken in the tenant.
    """

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    slug: str = Field(..., min_length=1, max_length=MAX_SLUG_CANDIDATE_LENGTH)
    content: str | None = None
    category: str | None = Field(default=None, max_length=64)
    tags: list[str] = Field(default_factory=list)


class TemplateUpdateRequest(BaseModel):
    """Request body for updating a template (partial; content replaced whole)."""

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str | None = None
    category: str | None = Field(default=None, max_length=64)
    tags: list[str] | None = None


class TemplateResponse(BaseModel):
    """Template response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    title: str
    slug: str
    content: str
    category: str
    tags: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TemplateStructureResponse(BaseModel):
    """Outcome of reading a template's content.

    status 'empty': no content yet; 'corrupt': content present but unusable
    (error_code and reason set, fields empty); 'ok': version and fields set.
    """

    template_id: str
    status: Literal["empty", "corrupt", "ok"]
    version: int | None = None
    fields: list[dict[str, Any]] = Field(default_factory=list)
    error_code: str | None = None
    reason: str | None = None


class PlaceholderResponse(BaseModel):
    """One placeholder of a template kind."""

    placeholder: str
    business_key: str
    required: bool


class TemplateKindResponse(BaseModel):
    """Template kind with its business placeholders."""

    kind: str
    label: str
    description: str
    placeholders: list[PlaceholderResponse]


class OfferInputValidationRequest(BaseModel):
    """Offer payload to check against a template kind's required values."""

    data: Any = None


class OfferInputValidationResponse(BaseModel):
    """Result of offer input validation."""

    ok: bool
    errors: list[str]
