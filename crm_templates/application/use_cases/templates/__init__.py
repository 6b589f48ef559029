"""Template use cases: create, update, duplicate, reset structure, read structure."""

from crm_templates.application.use_cases.templates.template_operations import (
    CreateTemplateUseCase,
    DuplicateTemplateUseCase,
    GetTemplateStructureUseCase,
    ResetTemplateStructureUseCase,
    TemplateStructure,
    UpdateTemplateUseCase,
)

__all__ = [
    "CreateTemplateUseCase",
    "DuplicateTemplateUseCase",
    "GetTemplateStructureUseCase",
    "ResetTemplateStructureUseCase",
    "TemplateStructure",
    "UpdateTemplateUseCase",
]
