"""
Module-level entry points.

Profile updates and outgoing-call capture through the process-wide
telemetry service. Each call initializes the service on first use with
the options it is given; later options are ignored.
"""

from typing import Any, Iterable, Optional

import structlog

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.models.outgoing_model import OutgoingRequest, OutgoingResponse
from lambda_telemetry.services.delivery_gate import DeliveryResult
from lambda_telemetry.services.profile_service import CompanyInput, UserInput
from lambda_telemetry.services.service_container import container

logger = structlog.get_logger(__name__)


def update_user(user: UserInput, options: Any = None) -> bool:
    return container.get_service(options).profiles.update_user(user)


def update_users_batch(users: Iterable[UserInput], options: Any = None) -> bool:
    return container.get_service(options).profiles.update_users_batch(users)


def update_company(company: CompanyInput, options: Any = None) -> bool:
    return container.get_service(options).profiles.update_company(company)


def update_companies_batch(companies: Iterable[CompanyInput], options: Any = None) -> bool:
    return container.get_service(options).profiles.update_companies_batch(companies)


def start_capture_outgoing(options: Any = None) -> bool:
    """
    Initialize the telemetry service with outgoing capture enabled.

    Returns:
        True if the active service captures outgoing requests (False when
        an earlier call already built it with capture disabled)
    """
    options = CaptureOptions.coerce(options).model_copy(update={"capture_outgoing_requests": True})
    service = container.get_service(options)

    enabled = service.options.capture_outgoing_requests
    if not enabled:
        logger.warning("Telemetry service already initialized without outgoing capture")
    elif service.options.debug:
        logger.info("Start capturing outgoing requests")
    return enabled


def capture_outgoing(
        request: OutgoingRequest,
        response: OutgoingResponse,
        weight: int = 1,
        options: Any = None
) -> Optional[DeliveryResult]:
    """
    Record one call made by the instrumented service.

    Args:
        request: The outbound request
        response: The response it received
        weight: Sampling weight of the event, 0 or more
        options: Options used if this call builds the service

    Returns:
        DeliveryResult, or None when outgoing capture is not enabled
    """
    service = container.get_service(options)
    if not service.options.capture_outgoing_requests:
        if service.options.debug:
            logger.info("Outgoing capture disabled, call not recorded", host=request.host)
        return None
    return service.capture_outgoing(request, response, weight=weight)
