"""Tests for configuration loading."""

import pytest

from healthsaas.config.settings import DEFAULT_API_URL, get_settings, validate_settings


def test_defaults():
    settings = get_settings()

    assert settings.api.base_url == DEFAULT_API_URL == "http://localhost:8000/api"
    assert settings.api.request_timeout is None
    assert settings.validate() == []


def test_console_variable_is_honoured(monkeypatch):
    from healthsaas.config.settings import reset_settings

    monkeypatch.setenv("VITE_API_URL", "https://console.example.org/api")
    reset_settings()

    assert get_settings().api.base_url == "https://console.example.org/api"


def test_explicit_variable_wins_over_console_variable(monkeypatch):
    from healthsaas.config.settings import reset_settings

    monkeypatch.setenv("VITE_API_URL", "https://console.example.org/api")
    monkeypatch.setenv("HEALTHSAAS_API_URL", "https://api.example.org")
    reset_settings()

    assert get_settings().api.base_url == "https://api.example.org"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_invalid_configuration_is_reported(monkeypatch):
    from healthsaas.config.settings import reset_settings

    monkeypatch.setenv("HEALTHSAAS_API_URL", "localhost:8000")
    monkeypatch.setenv("HEALTHSAAS_REQUEST_TIMEOUT", "0")
    reset_settings()

    with pytest.raises(ValueError) as exc_info:
        validate_settings()

    assert "HEALTHSAAS_API_URL" in str(exc_info.value)
    assert "HEALTHSAAS_REQUEST_TIMEOUT" in str(exc_info.value)


def test_unparseable_timeout_is_reported_not_raised(monkeypatch):
    from healthsaas.config.settings import reset_settings

    monkeypatch.setenv("HEALTHSAAS_REQUEST_TIMEOUT", "abc")
    reset_settings()

    settings = get_settings()

    assert settings.api.request_timeout is None
    assert settings.validate() == ["HEALTHSAAS_REQUEST_TIMEOUT must be a number, got 'abc'"]
    with pytest.raises(ValueError, match="HEALTHSAAS_REQUEST_TIMEOUT must be a number"):
        validate_settings()
