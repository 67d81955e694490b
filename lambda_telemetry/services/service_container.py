"""
Service Container

Process-wide holder for the telemetry service. The service is built once,
lazily, on first use and lives for the lifetime of the Lambda execution
environment. The first caller's options win.
"""

import threading
from typing import Any, Callable, Optional

import structlog

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.config.settings import TelemetrySettings, get_settings
from lambda_telemetry.services.collector_client import CollectorClient
from lambda_telemetry.services.telemetry_service import TelemetryService
from lambda_telemetry.utils.logger import setup_logging

logger = structlog.get_logger(__name__)

ServiceFactory = Callable[[CaptureOptions, TelemetrySettings], TelemetryService]


def default_factory(options: CaptureOptions, settings: TelemetrySettings) -> TelemetryService:
    client = CollectorClient.from_settings(settings)
    return TelemetryService(options, client)


class TelemetryContainer:
    """
    Lazily-initialized telemetry service holder.

    Initialization is guarded by a lock so concurrent first calls build the
    service exactly once.
    """

    def __init__(self, factory: ServiceFactory = default_factory):
        self._factory = factory
        self._service: Optional[TelemetryService] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._service is not None

    def get_service(self, options: Any = None) -> TelemetryService:
        """
        Get the telemetry service, building it on first use.

        Args:
            options: CaptureOptions or legacy mapping; ignored once built

        Returns:
            The process-wide TelemetryService
        """
        service = self._service
        if service is not None:
            return service

        with self._lock:
            if self._service is None:
                settings = get_settings()
                if settings.configures_logging():
                    setup_logging(settings.LOG_LEVEL.value, settings.LOG_FORMAT)
                self._service = self._factory(CaptureOptions.coerce(options), settings)
                logger.info("Telemetry service created")
            return self._service

    def set_factory(self, factory: ServiceFactory) -> None:
        with self._lock:
            self._factory = factory

    def reset(self) -> None:
        """Drop the current service; the next call builds a new one."""
        with self._lock:
            if self._service is not None:
                self._service.client.close()
            self._service = None


container = TelemetryContainer()


def get_telemetry_service(options: Any = None) -> TelemetryService:
    return container.get_service(options)
