"""
Services package.

Collector client, delivery gate, profile updates and the lazily-built
telemetry service.
"""

from lambda_telemetry.services.collector_client import CollectorClient, EventSubmitter
from lambda_telemetry.services.delivery_gate import DeliveryGate, DeliveryResult
from lambda_telemetry.services.profile_service import ProfileService
from lambda_telemetry.services.telemetry_service import TelemetryService
from lambda_telemetry.services.service_container import (
    TelemetryContainer,
    container,
    get_telemetry_service,
)
from lambda_telemetry.services.exceptions import (
    ServiceError,
    ConfigurationError,
    CollectorError,
)

__all__ = [
    "CollectorClient",
    "EventSubmitter",
    "DeliveryGate",
    "DeliveryResult",
    "ProfileService",
    "TelemetryService",
    "TelemetryContainer",
    "container",
    "get_telemetry_service",
    "ServiceError",
    "ConfigurationError",
    "CollectorError",
]
