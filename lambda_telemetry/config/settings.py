"""
Environment settings using Pydantic Settings.

This module provides process-level configuration read from environment
variables (and an optional .env file): the collector application id,
endpoint, timeouts and logging preferences.
"""

from typing import Optional
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lambda_telemetry.config.constants import (
    DEFAULT_COLLECTOR_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
)


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TelemetrySettings(BaseSettings):
    """Telemetry settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        validate_assignment=True,
        extra="ignore",
    )

    # Collector Configuration
    MOESIF_APPLICATION_ID: str = Field(
        default="",
        description="Application id sent with every collector request"
    )
    MOESIF_BASE_URL: str = Field(
        default=DEFAULT_COLLECTOR_BASE_URL,
        description="Collector base URL"
    )
    MOESIF_REQUEST_TIMEOUT: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        le=30,
        description="Collector request timeout in seconds, kept below the function timeout"
    )

    # Logging Configuration
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level"
    )
    LOG_FORMAT: str = Field(
        default="json",
        pattern=r"^(json|text)$",
        description="Log output format"
    )

    @field_validator("MOESIF_BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Collector base URL must be http(s): {v}")
        return v.rstrip("/")

    def configures_logging(self) -> bool:
        """True when LOG_LEVEL or LOG_FORMAT was set explicitly."""
        return bool(self.model_fields_set & {"LOG_LEVEL", "LOG_FORMAT"})


_settings: Optional[TelemetrySettings] = None


@lru_cache()
def get_settings() -> TelemetrySettings:
    """
    Get telemetry settings (cached singleton).

    Returns:
        TelemetrySettings: Settings parsed from the environment
    """
    global _settings
    if _settings is None:
        _settings = TelemetrySettings()
    return _settings


def reload_settings() -> TelemetrySettings:
    """
    Force reload of telemetry settings.

    Clears the cache so the environment is parsed again; used by tests.
    """
    global _settings
    _settings = None
    get_settings.cache_clear()
    return get_settings()
