"""
Event assembler.

Composes the body classifier, URI reconstruction, header normalization,
client IP resolution and identity resolution into one EventRecord per
exchange. Single pass, no retained state: the same input, callbacks and
clock always produce the same record.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.core.adapters.base_adapter import BaseRequestAdapter, GatewayResponseView
from lambda_telemetry.core.identity_resolver import IdentityResolver
from lambda_telemetry.core.normalizers.body_classifier import BodyClassifier
from lambda_telemetry.core.normalizers.header_normalizer import expand_headers, normalize_headers
from lambda_telemetry.core.normalizers.uri_builder import build_outgoing_uri
from lambda_telemetry.models.event_model import EventRecord, RequestRecord, ResponseRecord
from lambda_telemetry.models.outgoing_model import OutgoingRequest, OutgoingResponse
from lambda_telemetry.models.types import Direction
from lambda_telemetry.utils.client_ip import ClientIpResolver


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventAssembler:
    """Builds event records for incoming and outgoing exchanges."""

    def __init__(
            self,
            options: CaptureOptions,
            ip_resolver: Optional[ClientIpResolver] = None,
            clock: Optional[Clock] = None
    ):
        self.options = options
        self.ip_resolver = ip_resolver or ClientIpResolver()
        self.clock = clock or utc_now
        self.identity = IdentityResolver(options)
        self.incoming_classifier = BodyClassifier(options.log_body, options.debug)
        self.outgoing_classifier = BodyClassifier(options.log_body_outgoing, options.debug)

    def build_incoming_event(
            self,
            adapter: BaseRequestAdapter,
            response: GatewayResponseView,
            raw_request: Any = None,
            raw_response: Any = None
    ) -> EventRecord:
        """
        Assemble the event for a request received by the wrapped handler.

        Args:
            adapter: Adapter over the raw Lambda event
            response: Parsed handler response
            raw_request: Object handed to enrichment callbacks as the request
                (defaults to the adapter's raw event)
            raw_response: Object handed to enrichment callbacks as the response
                (defaults to the parsed response)

        Returns:
            EventRecord with direction Incoming and weight 1
        """
        if raw_request is None:
            raw_request = adapter.raw_event
        if raw_response is None:
            raw_response = response

        request_record = self._build_request_record(adapter)
        response_record = self._build_response_record(response)

        user_id, company_id, session_token, metadata = self.identity.resolve_all(
            raw_request, raw_response, adapter
        )

        return EventRecord(
            request=request_record,
            response=response_record,
            session_token=session_token,
            user_id=user_id,
            company_id=company_id,
            metadata=metadata,
            direction=Direction.INCOMING,
            weight=1,
        )

    def build_outgoing_event(
            self,
            request: OutgoingRequest,
            response: OutgoingResponse,
            weight: int = 1
    ) -> EventRecord:
        """
        Assemble the event for a call made by the instrumented service.

        Bodies are classified with ``log_body_outgoing`` and no base64 hint.
        Identity callbacks receive the outgoing request and response models.
        """
        req_body, req_encoding = self.outgoing_classifier.classify(request.body)
        rsp_body, rsp_encoding = self.outgoing_classifier.classify(response.body)

        request_record = RequestRecord(
            time=request.time,
            uri=build_outgoing_uri(request.scheme, request.host, request.path, request.query),
            verb=request.method,
            api_version=self.options.api_version,
            ip_address=None,
            headers=normalize_headers(request.headers),
            body=req_body,
            transfer_encoding=req_encoding,
        )
        response_record = ResponseRecord(
            time=response.time,
            status=response.status,
            ip_address=None,
            headers=normalize_headers(response.headers),
            body=rsp_body,
            transfer_encoding=rsp_encoding,
        )

        user_id, company_id, session_token, metadata = self.identity.resolve_all(request, response)

        return EventRecord(
            request=request_record,
            response=response_record,
            session_token=session_token,
            user_id=user_id,
            company_id=company_id,
            metadata=metadata,
            direction=Direction.OUTGOING,
            weight=weight,
        )

    def _build_request_record(self, adapter: BaseRequestAdapter) -> RequestRecord:
        req_time = self.clock()
        body, transfer_encoding = self.incoming_classifier.classify(adapter.body, adapter.is_base64_hint)
        headers = normalize_headers(adapter.headers)

        return RequestRecord(
            time=req_time,
            uri=adapter.uri,
            verb=adapter.method,
            api_version=self.options.api_version,
            ip_address=self.ip_resolver.resolve(expand_headers(headers), adapter.source_ip),
            headers=headers,
            body=body,
            transfer_encoding=transfer_encoding,
        )

    def _build_response_record(self, response: GatewayResponseView) -> ResponseRecord:
        rsp_time = self.clock()
        body, transfer_encoding = self.incoming_classifier.classify(response.body, response.is_base64_encoded)

        return ResponseRecord(
            time=rsp_time,
            status=response.status_code,
            ip_address=None,
            headers=normalize_headers(response.headers),
            body=body,
            transfer_encoding=transfer_encoding,
        )
