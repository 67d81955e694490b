"""
Core normalization engine.

Turns raw API Gateway request/response pairs (and pre-built outgoing
exchanges) into canonical event records.
"""

from lambda_telemetry.core.event_assembler import EventAssembler
from lambda_telemetry.core.identity_resolver import IdentityResolver
from lambda_telemetry.core.adapters import (
    BaseRequestAdapter,
    ProxyRequestAdapter,
    HttpApiRequestAdapter,
    create_adapter,
)
from lambda_telemetry.core.exceptions import CoreError, CallbackError, EventShapeError

__all__ = [
    "EventAssembler",
    "IdentityResolver",
    "BaseRequestAdapter",
    "ProxyRequestAdapter",
    "HttpApiRequestAdapter",
    "create_adapter",
    "CoreError",
    "CallbackError",
    "EventShapeError",
]
