"""
Models package.

Event records, profile records, API Gateway payload models and shared
enums used by the normalization engine.
"""

from lambda_telemetry.models.types import (
    TransferEncoding,
    Direction,
    EventShape,
    DeliveryStatus,
)
from lambda_telemetry.models.event_model import (
    RequestRecord,
    ResponseRecord,
    EventRecord,
)
from lambda_telemetry.models.profile_model import UserProfile, CompanyProfile
from lambda_telemetry.models.gateway_events import (
    ProxyRequestEvent,
    ProxyResponse,
    HttpApiRequestEvent,
    HttpApiResponse,
)
from lambda_telemetry.models.outgoing_model import OutgoingRequest, OutgoingResponse

__all__ = [
    "TransferEncoding",
    "Direction",
    "EventShape",
    "DeliveryStatus",
    "RequestRecord",
    "ResponseRecord",
    "EventRecord",
    "UserProfile",
    "CompanyProfile",
    "ProxyRequestEvent",
    "ProxyResponse",
    "HttpApiRequestEvent",
    "HttpApiResponse",
    "OutgoingRequest",
    "OutgoingResponse",
]
