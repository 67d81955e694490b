"""
Configuration package for lambda-telemetry.

This package provides environment-based settings, the typed capture
options handed to the handler wrappers, and package constants.
"""

from lambda_telemetry.config.settings import (
    get_settings,
    reload_settings,
    TelemetrySettings,
    LogLevel,
)
from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.config.constants import (
    SERVICE_NAME,
    SERVICE_VERSION,
    DEFAULT_COLLECTOR_BASE_URL,
    COLLECTOR_ENDPOINTS,
)

__all__ = [
    "get_settings",
    "reload_settings",
    "TelemetrySettings",
    "LogLevel",
    "CaptureOptions",
    "SERVICE_NAME",
    "SERVICE_VERSION",
    "DEFAULT_COLLECTOR_BASE_URL",
    "COLLECTOR_ENDPOINTS",
]
