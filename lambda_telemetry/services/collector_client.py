"""
Collector client.

Synchronous HTTP client for the analytics collector: event submission and
user/company profile updates. Lambda handlers run synchronously, so this
uses ``httpx.Client`` with connection pooling across warm invocations.
Batching, queuing and retries are left to the collector side.
"""

import json
from typing import Any, Optional, Protocol, Sequence

import httpx
import structlog

from lambda_telemetry.config.constants import (
    APPLICATION_ID_HEADER,
    COLLECTOR_ENDPOINTS,
    DEFAULT_COLLECTOR_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    USER_AGENT,
)
from lambda_telemetry.config.settings import TelemetrySettings
from lambda_telemetry.models.event_model import EventRecord
from lambda_telemetry.models.profile_model import CompanyProfile, UserProfile
from lambda_telemetry.services.exceptions import CollectorError, ConfigurationError


class EventSubmitter(Protocol):
    """Anything that accepts a finished event record."""

    def submit(self, event: EventRecord) -> None:
        ...


class CollectorClient:
    """HTTP client for the collector API."""

    def __init__(
            self,
            application_id: str,
            base_url: str = DEFAULT_COLLECTOR_BASE_URL,
            timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT,
            transport: Optional[httpx.BaseTransport] = None
    ):
        self.logger = structlog.get_logger(self.__class__.__name__)
        self.application_id = (application_id or "").strip()
        self.base_url = base_url.rstrip("/")
        self.configuration_error: Optional[ConfigurationError] = None

        if not self.application_id:
            self.configuration_error = ConfigurationError(
                "Collector application id is not configured",
                config_key="MOESIF_APPLICATION_ID"
            )
            self.logger.error(
                "Collector client misconfigured",
                error_code=self.configuration_error.error_code,
                config_key=self.configuration_error.config_key
            )

        self.http_client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout_seconds,
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            headers={
                APPLICATION_ID_HEADER: self.application_id,
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT
            },
            transport=transport
        )

        self.logger.info(
            "Collector client initialized",
            base_url=self.base_url,
            configured=self.configuration_error is None
        )

    @classmethod
    def from_settings(
            cls,
            settings: TelemetrySettings,
            transport: Optional[httpx.BaseTransport] = None
    ) -> "CollectorClient":
        return cls(
            application_id=settings.MOESIF_APPLICATION_ID,
            base_url=settings.MOESIF_BASE_URL,
            timeout_seconds=settings.MOESIF_REQUEST_TIMEOUT,
            transport=transport
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def submit(self, event: EventRecord) -> None:
        """
        Send one event to the collector.

        Raises:
            CollectorError: On transport failure or a non-2xx response
        """
        self._post("event", event.to_payload())

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def update_user(self, user: UserProfile) -> None:
        self._post("user", user.to_payload())

    def update_users_batch(self, users: Sequence[UserProfile]) -> None:
        self._post("users_batch", [user.to_payload() for user in users])

    def update_company(self, company: CompanyProfile) -> None:
        self._post("company", company.to_payload())

    def update_companies_batch(self, companies: Sequence[CompanyProfile]) -> None:
        self._post("companies_batch", [company.to_payload() for company in companies])

    def close(self) -> None:
        self.http_client.close()

    def _post(self, endpoint_name: str, payload: Any) -> httpx.Response:
        endpoint = COLLECTOR_ENDPOINTS[endpoint_name]

        if self.configuration_error is not None:
            raise CollectorError(
                self.configuration_error.args[0],
                endpoint=endpoint,
                original_error=self.configuration_error
            )

        content = json.dumps(payload, sort_keys=True, separators=(",", ":"))

        try:
            response = self.http_client.post(endpoint, content=content)
        except httpx.TimeoutException as e:
            raise CollectorError(
                f"Collector request timed out: {endpoint}",
                endpoint=endpoint,
                original_error=e
            )
        except httpx.HTTPError as e:
            raise CollectorError(
                f"Collector request failed: {e}",
                endpoint=endpoint,
                original_error=e
            )

        if response.status_code >= 300:
            raise CollectorError(
                f"Collector returned HTTP {response.status_code}",
                endpoint=endpoint,
                status_code=response.status_code,
                response_body=response.text[:500]
            )

        return response
