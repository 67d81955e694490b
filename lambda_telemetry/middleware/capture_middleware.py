"""
Capture Middleware
Wraps AWS Lambda handlers behind API Gateway and ships one telemetry
event per handled request.

The wrapped handler always runs first and its return value is handed back
unchanged. Capture happens afterwards and can never fail the invocation.
"""

import functools
from typing import Any, Callable, Optional

import structlog

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.models.types import EventShape
from lambda_telemetry.services.delivery_gate import DeliveryResult
from lambda_telemetry.services.service_container import TelemetryContainer, container as default_container

logger = structlog.get_logger()

Handler = Callable[[Any, Any], Any]


class CaptureMiddleware:
    """Middleware capturing request/response pairs of a Lambda handler"""

    def __init__(
            self,
            options: Any = None,
            shape: EventShape = EventShape.PROXY,
            container: Optional[TelemetryContainer] = None
    ):
        self.options = CaptureOptions.coerce(options)
        self.shape = EventShape(shape)
        self.container = container or default_container

    def __call__(self, handler: Handler) -> Handler:
        return self.wrap(handler)

    def wrap(self, handler: Handler) -> Handler:
        """Return a handler that captures every successful invocation."""

        @functools.wraps(handler)
        def wrapped(event, context=None):
            # Handler exceptions propagate untouched; nothing is captured
            result = handler(event, context)
            self.capture(event, result)
            return result

        wrapped.capture_middleware = self
        return wrapped

    def capture(self, event: Any, result: Any) -> Optional[DeliveryResult]:
        """
        Capture one request/response pair.

        Returns:
            DeliveryResult, or None when the service could not be obtained
        """
        try:
            service = self.container.get_service(self.options)
            return service.capture_incoming(self.shape, event, result)
        except Exception as e:
            logger.error(
                "Telemetry capture failed",
                shape=self.shape.value,
                error_type=type(e).__name__,
                error_message=str(e)
            )
            return None


def wrap_proxy_handler(handler: Handler, options: Any = None) -> Handler:
    """Wrap a REST API proxy (payload format 1.0) handler."""
    return CaptureMiddleware(options, EventShape.PROXY).wrap(handler)


def wrap_http_api_handler(handler: Handler, options: Any = None) -> Handler:
    """Wrap an HTTP API (payload format 2.0) handler."""
    return CaptureMiddleware(options, EventShape.HTTP_API).wrap(handler)


def capture_proxy_events(options: Any = None) -> Callable[[Handler], Handler]:
    """
    Decorator form of :func:`wrap_proxy_handler`.

    Example:
        @capture_proxy_events({"Api_Version": "1.0.0"})
        def handler(event, context):
            ...
    """
    return CaptureMiddleware(options, EventShape.PROXY)


def capture_http_api_events(options: Any = None) -> Callable[[Handler], Handler]:
    """Decorator form of :func:`wrap_http_api_handler`."""
    return CaptureMiddleware(options, EventShape.HTTP_API)
