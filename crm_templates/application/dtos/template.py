"""DTOs for templates (read-model returned by the template repository)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TemplateResult:
    """Template read-model. content is the serialized {version, fields} envelope."""

    id: str
    tenant_id: str
    title: str
    slug: str
    content: str
    category: str
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
