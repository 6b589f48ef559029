"""Settings validation and caching."""

import pytest
from pydantic import ValidationError

from crm_templates.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.tenant_header_name == "X-Tenant-ID"
    assert settings.slug_insert_max_attempts == 3


def test_slug_insert_max_attempts_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, slug_insert_max_attempts=0)


def test_database_url_must_name_async_driver() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="postgresql://u:p@localhost/db")
    settings = Settings(
        _env_file=None, database_url="postgresql+asyncpg://u:p@localhost/db"
    )
    assert settings.database_url.startswith("postgresql+asyncpg")


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("SLUG_INSERT_MAX_ATTEMPTS", "5")
    assert Settings(_env_file=None).slug_insert_max_attempts == 5


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
