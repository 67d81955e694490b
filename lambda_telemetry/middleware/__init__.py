"""
Handler wrappers for AWS Lambda functions behind API Gateway.
"""

from lambda_telemetry.middleware.capture_middleware import (
    CaptureMiddleware,
    wrap_proxy_handler,
    wrap_http_api_handler,
    capture_proxy_events,
    capture_http_api_events,
)

__all__ = [
    "CaptureMiddleware",
    "wrap_proxy_handler",
    "wrap_http_api_handler",
    "capture_proxy_events",
    "capture_http_api_events",
]
