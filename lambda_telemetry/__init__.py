"""
lambda-telemetry

Captures AWS Lambda request/response pairs behind API Gateway and ships
them as normalized telemetry events to an analytics collector.
"""

from lambda_telemetry.config import CaptureOptions, TelemetrySettings, get_settings
from lambda_telemetry.middleware import (
    CaptureMiddleware,
    wrap_proxy_handler,
    wrap_http_api_handler,
    capture_proxy_events,
    capture_http_api_events,
)
from lambda_telemetry.client import (
    update_user,
    update_users_batch,
    update_company,
    update_companies_batch,
    start_capture_outgoing,
    capture_outgoing,
)
from lambda_telemetry.models import (
    EventRecord,
    RequestRecord,
    ResponseRecord,
    UserProfile,
    CompanyProfile,
    OutgoingRequest,
    OutgoingResponse,
    TransferEncoding,
    Direction,
)

__all__ = [
    "CaptureOptions",
    "TelemetrySettings",
    "get_settings",
    "CaptureMiddleware",
    "wrap_proxy_handler",
    "wrap_http_api_handler",
    "capture_proxy_events",
    "capture_http_api_events",
    "update_user",
    "update_users_batch",
    "update_company",
    "update_companies_batch",
    "start_capture_outgoing",
    "capture_outgoing",
    "EventRecord",
    "RequestRecord",
    "ResponseRecord",
    "UserProfile",
    "CompanyProfile",
    "OutgoingRequest",
    "OutgoingResponse",
    "TransferEncoding",
    "Direction",
]

__version__ = "1.0.0"
