"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from crm_templates.api.v1.dependencies.
"""

from fastapi import APIRouter

from crm_templates.api.v1.endpoints import health, template_kinds, templates

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    template_kinds.router, prefix="/template-kinds", tags=["template-kinds"]
)
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
