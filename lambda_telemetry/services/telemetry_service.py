"""
Telemetry Service

Ties the event assembler, the delivery gate and the profile service
together behind one object built once per process.
"""

from typing import Any, Optional

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.core.adapters import create_adapter
from lambda_telemetry.core.event_assembler import Clock, EventAssembler
from lambda_telemetry.models.outgoing_model import OutgoingRequest, OutgoingResponse
from lambda_telemetry.models.types import DeliveryStatus, EventShape
from lambda_telemetry.services.base_service import BaseService
from lambda_telemetry.services.collector_client import CollectorClient, EventSubmitter
from lambda_telemetry.services.delivery_gate import DeliveryGate, DeliveryResult
from lambda_telemetry.services.profile_service import ProfileService
from lambda_telemetry.utils.client_ip import ClientIpResolver


class TelemetryService(BaseService):
    """Captures exchanges and forwards them to the collector"""

    def __init__(
            self,
            options: CaptureOptions,
            client: CollectorClient,
            submitter: Optional[EventSubmitter] = None,
            ip_resolver: Optional[ClientIpResolver] = None,
            clock: Optional[Clock] = None
    ):
        super().__init__()
        self.options = options
        self.client = client
        self.assembler = EventAssembler(options, ip_resolver=ip_resolver, clock=clock)
        self.gate = DeliveryGate(submitter or client, options)
        self.profiles = ProfileService(client)

        if options.debug:
            self.logger.info(
                "Telemetry service initialized",
                log_body=options.log_body,
                log_body_outgoing=options.log_body_outgoing,
                api_version=options.api_version,
                capture_outgoing_requests=options.capture_outgoing_requests
            )

    def capture_incoming(self, shape: EventShape, raw_event: Any, result: Any) -> DeliveryResult:
        """
        Capture one handled request.

        Args:
            shape: API Gateway payload format of ``raw_event``
            raw_event: Event the wrapped handler received
            result: Value the wrapped handler returned

        Returns:
            DeliveryResult; failures are reported, never raised
        """
        try:
            adapter = create_adapter(shape, raw_event)
            response = adapter.read_response(result)
            event = self.assembler.build_incoming_event(
                adapter,
                response,
                raw_request=raw_event,
                raw_response=result
            )
        except Exception as e:
            error = self.handle_service_error(e, "capture_incoming", shape=EventShape(shape).value)
            return DeliveryResult(status=DeliveryStatus.FAILED, error=str(error))

        return self.gate.forward(event, raw_event, result)

    def capture_outgoing(
            self,
            request: OutgoingRequest,
            response: OutgoingResponse,
            weight: int = 1
    ) -> DeliveryResult:
        """Capture one call made by the instrumented service."""
        try:
            event = self.assembler.build_outgoing_event(request, response, weight=weight)
        except Exception as e:
            error = self.handle_service_error(e, "capture_outgoing", host=request.host)
            return DeliveryResult(status=DeliveryStatus.FAILED, error=str(error))

        return self.gate.forward(event, request, response)
