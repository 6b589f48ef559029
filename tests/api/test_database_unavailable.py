"""Without DATABASE_URL, template endpoints answer 503 instead of failing at startup."""

import pytest
from httpx import ASGITransport, AsyncClient

from crm_templates.core.config import get_settings
from crm_templates.infrastructure.persistence import database
from crm_templates.main import app


@pytest.fixture
def unconfigured_database(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setattr(database, "engine", None)
    monkeypatch.setattr(database, "AsyncSessionLocal", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


async def test_templates_return_503(unconfigured_database) -> None:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/api/v1/templates", headers={"X-Tenant-ID": "t1"})
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"
