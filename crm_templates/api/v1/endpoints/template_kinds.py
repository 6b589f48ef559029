"""Template kind catalog: business placeholders and offer input checks per kind."""

from fastapi import APIRouter

from crm_templates.application.services.business_config import (
    TEMPLATE_CONFIGS,
    BusinessConfig,
    get_all_placeholders,
    validate_offer_input,
)
from crm_templates.domain.enums import TemplateKind
from crm_templates.schemas.template import (
    OfferInputValidationRequest,
    OfferInputValidationResponse,
    PlaceholderResponse,
    TemplateKindResponse,
)

router = APIRouter()


def _to_response(kind: TemplateKind, config: BusinessConfig) -> TemplateKindResponse:
    return TemplateKindResponse(
        kind=kind.value,
        label=config.label,
        description=config.description,
        placeholders=[
            PlaceholderResponse(
                placeholder=p["placeholder"],
                business_key=p["businessKey"],
                required=p["required"],
            )
            for p in get_all_placeholders(kind)
        ],
    )


@router.get("", response_model=list[TemplateKindResponse])
def list_template_kinds() -> list[TemplateKindResponse]:
    """List every template kind with its placeholder table."""
    return [_to_response(kind, config) for kind, config in TEMPLATE_CONFIGS.items()]


@router.post("/{kind}/validate-offer-input", response_model=OfferInputValidationResponse)
def validate_offer(
    kind: str, body: OfferInputValidationRequest
) -> OfferInputValidationResponse:
    """Check an offer payload against the kind's required values (GENERIC for unknown kinds)."""
    result = validate_offer_input(kind, body.data)
    return OfferInputValidationResponse(ok=result.ok, errors=list(result.errors))
