"""
Adapter for REST API proxy events (payload format 1.0).
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from lambda_telemetry.core.adapters.base_adapter import BaseRequestAdapter
from lambda_telemetry.core.exceptions import EventShapeError
from lambda_telemetry.core.normalizers.header_normalizer import merge_headers
from lambda_telemetry.core.normalizers.uri_builder import build_proxy_uri
from lambda_telemetry.models.gateway_events import ProxyRequestEvent, ProxyResponse
from lambda_telemetry.models.types import EventShape


class ProxyRequestAdapter(BaseRequestAdapter):
    """Reads an ``APIGatewayProxyRequest`` dictionary."""

    def __init__(self, raw_event: Any):
        super().__init__(raw_event)

        if not isinstance(raw_event, dict):
            raise EventShapeError(EventShape.PROXY.value, f"expected dict, got {type(raw_event).__name__}")

        try:
            self.event = ProxyRequestEvent.model_validate(raw_event)
        except ValidationError as e:
            raise EventShapeError(EventShape.PROXY.value, str(e))

        self._headers = merge_headers(self.event.headers, self.event.multi_value_headers)

    @property
    def shape(self) -> EventShape:
        return EventShape.PROXY

    @property
    def headers(self) -> Dict[str, Any]:
        return self._headers

    @property
    def uri(self) -> str:
        return build_proxy_uri(
            self._headers,
            self.event.path,
            self.event.query_string_parameters,
            self.event.multi_value_query_string_parameters,
        )

    @property
    def method(self) -> str:
        return self.event.http_method

    @property
    def body(self) -> Optional[str]:
        return self.event.body

    @property
    def is_base64_hint(self) -> bool:
        return self.event.is_base64_encoded

    @property
    def source_ip(self) -> Optional[str]:
        return self.event.request_context.identity.source_ip or None

    @property
    def platform_user_id(self) -> Optional[str]:
        return self.event.request_context.identity.cognito_identity_id or None

    def read_response(self, result: Any) -> ProxyResponse:
        response = ProxyResponse.from_handler_result(result)
        if response.multi_value_headers:
            response.headers = merge_headers(response.headers, response.multi_value_headers)
        return response
