"""Tests for settings loading."""

from solarman.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("ENV", "NODE_ENV", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.env == "development"
    assert settings.port == 5000
    assert settings.base_url == "http://localhost:5000"
    assert settings.is_production is False


def test_node_env_alias(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.setenv("NODE_ENV", "production")

    settings = Settings(_env_file=None)

    assert settings.is_production is True
    assert settings.base_url == settings.public_url


def test_port_and_credentials_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SANDBOX_PAYPAL_CLIENT_ID", "sandbox-id")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.local_url == "http://localhost:8080"
    assert settings.sandbox_paypal_client_id.get_secret_value() == "sandbox-id"
