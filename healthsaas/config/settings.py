"""
Centralized Configuration Management for HealthSaaS

Validates and provides access to all configuration settings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv


# Load environment variables
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_STORAGE_PATH = str(Path.home() / ".healthsaas" / "local_storage.json")


class ApiSettings(BaseSettings):
    """Backend API configuration."""
    model_config = {"env_prefix": ""}

    base_url: str = Field(default=DEFAULT_API_URL)
    request_timeout: Optional[float] = Field(default=None)


class StorageSettings(BaseSettings):
    """Client-side persistent storage."""
    model_config = {"env_prefix": ""}

    local_storage_path: str = Field(default=DEFAULT_STORAGE_PATH)


class AppSettings(BaseSettings):
    """Application configuration."""
    model_config = {"env_prefix": ""}

    log_level: str = Field(default="INFO")
    environment: str = Field(default="development")


def _optional_float(name: str, errors: list[str]) -> Optional[float]:
    """Read a float from the environment; unparseable values are recorded, not raised."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        errors.append(f"{name} must be a number, got {value!r}")
        return None


class HealthSaaSSettings:
    """Main settings class that aggregates all configuration."""

    def __init__(self):
        self._parse_errors: list[str] = []
        self.api = ApiSettings(
            base_url=os.getenv("HEALTHSAAS_API_URL") or os.getenv("VITE_API_URL") or DEFAULT_API_URL,
            request_timeout=_optional_float("HEALTHSAAS_REQUEST_TIMEOUT", self._parse_errors),
        )
        self.storage = StorageSettings(
            local_storage_path=os.getenv("HEALTHSAAS_STORAGE_PATH", DEFAULT_STORAGE_PATH)
        )
        self.app = AppSettings(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            environment=os.getenv("ENVIRONMENT", "development"),
        )

    def validate(self) -> list[str]:
        """
        Validate settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = list(self._parse_errors)

        if not self.api.base_url.startswith(("http://", "https://")):
            errors.append("HEALTHSAAS_API_URL must be an http(s) URL")
        if self.api.request_timeout is not None and self.api.request_timeout <= 0:
            errors.append("HEALTHSAAS_REQUEST_TIMEOUT must be positive")
        if not self.storage.local_storage_path:
            errors.append("HEALTHSAAS_STORAGE_PATH must not be empty")

        return errors


# Global settings instance
_settings: Optional[HealthSaaSSettings] = None


def get_settings() -> HealthSaaSSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = HealthSaaSSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None


def validate_settings() -> None:
    """Validate settings and raise ValueError if invalid."""
    settings = get_settings()
    errors = settings.validate()
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")
