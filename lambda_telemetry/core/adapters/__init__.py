"""
Request adapters.

One capability set over both API Gateway payload formats, plus a small
registry mapping an EventShape to its adapter class.
"""

from typing import Any, Dict, Type

from lambda_telemetry.core.adapters.base_adapter import BaseRequestAdapter, GatewayResponseView
from lambda_telemetry.core.adapters.proxy_adapter import ProxyRequestAdapter
from lambda_telemetry.core.adapters.http_api_adapter import HttpApiRequestAdapter
from lambda_telemetry.models.types import EventShape

ADAPTER_REGISTRY: Dict[EventShape, Type[BaseRequestAdapter]] = {
    EventShape.PROXY: ProxyRequestAdapter,
    EventShape.HTTP_API: HttpApiRequestAdapter,
}


def create_adapter(shape: EventShape, raw_event: Any) -> BaseRequestAdapter:
    """Instantiate the adapter registered for ``shape``."""
    return ADAPTER_REGISTRY[EventShape(shape)](raw_event)


__all__ = [
    "BaseRequestAdapter",
    "GatewayResponseView",
    "ProxyRequestAdapter",
    "HttpApiRequestAdapter",
    "ADAPTER_REGISTRY",
    "create_adapter",
]
