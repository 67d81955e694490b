"""
Adapter for HTTP API events (payload format 2.0).
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from lambda_telemetry.core.adapters.base_adapter import BaseRequestAdapter
from lambda_telemetry.core.exceptions import EventShapeError
from lambda_telemetry.core.normalizers.header_normalizer import normalize_headers
from lambda_telemetry.core.normalizers.uri_builder import build_http_api_uri
from lambda_telemetry.models.gateway_events import HttpApiRequestEvent, HttpApiResponse
from lambda_telemetry.models.types import EventShape


class HttpApiRequestAdapter(BaseRequestAdapter):
    """Reads an ``APIGatewayV2HTTPRequest`` dictionary."""

    def __init__(self, raw_event: Any):
        super().__init__(raw_event)

        if not isinstance(raw_event, dict):
            raise EventShapeError(EventShape.HTTP_API.value, f"expected dict, got {type(raw_event).__name__}")

        try:
            self.event = HttpApiRequestEvent.model_validate(raw_event)
        except ValidationError as e:
            raise EventShapeError(EventShape.HTTP_API.value, str(e))

    @property
    def shape(self) -> EventShape:
        return EventShape.HTTP_API

    @property
    def headers(self) -> Dict[str, Any]:
        return normalize_headers(self.event.headers)

    @property
    def uri(self) -> str:
        return build_http_api_uri(
            self.event.headers,
            self.event.raw_path,
            self.event.raw_query_string,
        )

    @property
    def method(self) -> str:
        return self.event.request_context.http.method

    @property
    def body(self) -> Optional[str]:
        return self.event.body

    @property
    def is_base64_hint(self) -> bool:
        return self.event.is_base64_encoded

    @property
    def source_ip(self) -> Optional[str]:
        return self.event.request_context.http.source_ip or None

    @property
    def platform_user_id(self) -> Optional[str]:
        authorizer = self.event.request_context.authorizer
        if authorizer is None or authorizer.iam is None:
            return None

        cognito = authorizer.iam.cognito_identity
        if cognito is None:
            return None
        return cognito.identity_id or None

    def read_response(self, result: Any) -> HttpApiResponse:
        return HttpApiResponse.from_handler_result(result)
