"""
Delivery Gate

Applies the skip predicate and the masking transform to a finished event,
then hands it to the event submitter. Nothing raised here reaches the
wrapped handler's caller: every outcome is returned as a DeliveryResult.
"""

from dataclasses import dataclass
from typing import Any, Optional

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.core.exceptions import CallbackError
from lambda_telemetry.models.event_model import EventRecord
from lambda_telemetry.models.types import DeliveryStatus
from lambda_telemetry.services.base_service import BaseService
from lambda_telemetry.services.collector_client import EventSubmitter


@dataclass
class DeliveryResult:
    """Outcome of one pass through the gate."""
    status: DeliveryStatus
    event: Optional[EventRecord] = None
    error: Optional[str] = None

    @property
    def sent(self) -> bool:
        return self.status == DeliveryStatus.SENT


class DeliveryGate(BaseService):
    """Decides whether and how an event reaches the collector"""

    def __init__(self, submitter: EventSubmitter, options: CaptureOptions):
        super().__init__()
        self.submitter = submitter
        self.options = options

    def forward(self, event: EventRecord, request: Any, response: Any) -> DeliveryResult:
        """
        Forward an event through skip and mask policies.

        Args:
            event: Assembled event record
            request: Object given to ``should_skip`` as the request
            response: Object given to ``should_skip`` as the response

        Returns:
            DeliveryResult describing what happened
        """
        if self._should_skip(request, response):
            if self.options.debug:
                self.logger.info("Skip sending the event to the collector", uri=event.request.uri)
            return DeliveryResult(status=DeliveryStatus.SKIPPED, event=event)

        if self.options.debug:
            self.logger.info("Sending the event to the collector", uri=event.request.uri)

        if self.options.mask_event_model is not None:
            try:
                event = self._mask(event)
            except CallbackError as e:
                # Never send what the mask was supposed to hide
                self.logger.error("Event dropped, masking failed", **e.to_dict())
                return DeliveryResult(status=DeliveryStatus.DROPPED, error=e.message)

        try:
            self.submitter.submit(event)
        except Exception as e:
            error = self.handle_service_error(e, "submit_event", uri=event.request.uri)
            return DeliveryResult(status=DeliveryStatus.FAILED, event=event, error=str(error))

        if self.options.debug:
            self.logger.info("Successfully sent event to the collector", uri=event.request.uri)

        return DeliveryResult(status=DeliveryStatus.SENT, event=event)

    def _should_skip(self, request: Any, response: Any) -> bool:
        if self.options.should_skip is None:
            return False

        try:
            return bool(self.options.should_skip(request, response))
        except Exception as e:
            error = CallbackError("should_skip", e)
            self.logger.warning("Skip predicate failed, sending event", **error.to_dict())
            return False

    def _mask(self, event: EventRecord) -> EventRecord:
        try:
            masked = self.options.mask_event_model(event)
            if isinstance(masked, EventRecord):
                return masked
            return EventRecord.model_validate(masked)
        except Exception as e:
            raise CallbackError("mask_event_model", e)
