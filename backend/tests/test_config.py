"""Tests for Settings — env-driven, frozen, two-valued error-detail mode."""

import pytest
from pydantic import ValidationError

from dice_api.config import DEFAULT_CORS_ORIGINS, Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "NODE_ENV", "CORS_ORIGINS", "STATIC_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.node_env == "development"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.static_dir == "client"
    assert not settings.is_production


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("CORS_ORIGINS", '["https://dice.example"]')
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.is_production
    assert settings.cors_origins == ["https://dice.example"]


@pytest.mark.parametrize("node_env", ["development", "test", "staging", "PRODUCTION"])
def test_only_exact_production_suppresses_detail(node_env):
    assert not Settings(node_env=node_env, _env_file=None).is_production


def test_settings_are_frozen():
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.port = 1


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
