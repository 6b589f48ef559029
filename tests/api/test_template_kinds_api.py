"""Template kind catalog and offer input endpoints."""

from httpx import AsyncClient

from crm_templates.application.services.business_config import get_all_placeholders


async def test_list_template_kinds(client: AsyncClient) -> None:
    response = await client.get("/api/v1/template-kinds")
    assert response.status_code == 200
    kinds = {k["kind"]: k for k in response.json()}
    assert set(kinds) == {
        "GENERIC",
        "CDI_CADRE",
        "CDD_SAISONNIER",
        "AVENANT_TEMPS_PARTIEL",
        "PROMESSE_EMBAUCHE",
    }
    assert kinds["GENERIC"]["placeholders"] == []
    assert {
        "placeholder": "{{poste}}",
        "business_key": "offer.positionTitle",
        "required": True,
    } in kinds["CDI_CADRE"]["placeholders"]


async def test_catalog_matches_placeholder_table(client: AsyncClient) -> None:
    response = await client.get("/api/v1/template-kinds")
    for kind in response.json():
        expected = [
            {
                "placeholder": p["placeholder"],
                "business_key": p["businessKey"],
                "required": p["required"],
            }
            for p in get_all_placeholders(kind["kind"])
        ]
        assert kind["placeholders"] == expected


async def test_validate_offer_input(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/template-kinds/AVENANT_TEMPS_PARTIEL/validate-offer-input",
        json={"data": {"employee": {"name": "Durand"}}},
    )
    assert response.status_code == 200
    assert response.json() == {
        "ok": False,
        "errors": ["Amendment information is required"],
    }


async def test_validate_offer_input_unknown_kind_uses_generic(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/template-kinds/UNKNOWN/validate-offer-input", json={"data": {}}
    )
    assert response.json() == {"ok": True, "errors": []}
