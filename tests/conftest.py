"""
Shared pytest fixtures for the lambda-telemetry test suite.

Provides a fixed clock, a recording event submitter, raw API Gateway
event factories and a collector client backed by httpx.MockTransport.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import httpx
import pytest

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.services.collector_client import CollectorClient
from lambda_telemetry.services.service_container import TelemetryContainer
from lambda_telemetry.services.telemetry_service import TelemetryService

BASE_TIME = datetime(2024, 6, 15, 20, 0, tzinfo=timezone.utc)


# =============================================================================
# HELPERS
# =============================================================================


class FixedClock:
    """Clock returning BASE_TIME, BASE_TIME + 1ms, ... on successive calls."""

    def __init__(self, start: datetime = BASE_TIME):
        self.start = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.start + timedelta(milliseconds=self.calls)
        self.calls += 1
        return value


class RecordingSubmitter:
    """Event submitter keeping every event it receives."""

    def __init__(self, error: Optional[Exception] = None):
        self.events: List[Any] = []
        self.error = error

    def submit(self, event) -> None:
        if self.error is not None:
            raise self.error
        self.events.append(event)


class CollectorRecorder:
    """httpx.MockTransport handler recording collector requests."""

    def __init__(self, status_code: int = 201):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={})

    def payloads(self) -> List[Any]:
        return [json.loads(r.content) for r in self.requests]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def submitter() -> RecordingSubmitter:
    return RecordingSubmitter()


@pytest.fixture
def collector() -> CollectorRecorder:
    return CollectorRecorder()


@pytest.fixture
def collector_client(collector: CollectorRecorder) -> CollectorClient:
    client = CollectorClient(
        application_id="test-app-id",
        base_url="https://collector.test",
        transport=httpx.MockTransport(collector),
    )
    yield client
    client.close()


@pytest.fixture
def make_container(collector: CollectorRecorder, submitter: RecordingSubmitter, fixed_clock: FixedClock):
    """
    Return a function creating an isolated TelemetryContainer.

    Services built by the container submit events to the recording
    submitter and send profile updates through the mock collector.
    """
    built: List[TelemetryContainer] = []

    def _make_container() -> TelemetryContainer:
        def factory(options: CaptureOptions, settings) -> TelemetryService:
            client = CollectorClient(
                application_id="test-app-id",
                base_url="https://collector.test",
                transport=httpx.MockTransport(collector),
            )
            return TelemetryService(options, client, submitter=submitter, clock=fixed_clock)

        container = TelemetryContainer(factory)
        built.append(container)
        return container

    yield _make_container

    for container in built:
        container.reset()


@pytest.fixture
def proxy_event():
    """
    Return a function creating REST API proxy event dictionaries.

    Example:
        event = proxy_event(body='{"foo": "bar"}', is_base64_encoded=False)
    """

    def _proxy_event(
        body: Optional[str] = '{"foo": "bar"}',
        is_base64_encoded: bool = False,
        **overrides,
    ) -> Dict[str, Any]:
        event = {
            "resource": "/foo/bar",
            "path": "/foo/bar/dev",
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {"X-Forwarded-Proto": ["https"]},
            "queryStringParameters": {"foo": "bar"},
            "multiValueQueryStringParameters": {"foo": ["bar"]},
            "pathParameters": {"proxy": "/path/to/resource"},
            "stageVariables": {"baz": "bar"},
            "requestContext": {
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "stage": "dev",
                "identity": {"sourceIp": "198.51.100.10"},
            },
            "body": body,
            "isBase64Encoded": is_base64_encoded,
        }
        event.update(overrides)
        return event

    return _proxy_event


@pytest.fixture
def http_api_event():
    """Return a function creating HTTP API (payload 2.0) event dictionaries."""

    def _http_api_event(
        body: Optional[str] = None,
        is_base64_encoded: bool = False,
        **overrides,
    ) -> Dict[str, Any]:
        event = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/path/to/foo",
            "rawQueryString": "parameter1=value1&parameter1=value2&parameter2=value",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "requestId": "id",
                "stage": "$default",
                "http": {
                    "method": "GET",
                    "path": "/path/to/foo",
                    "protocol": "HTTP/1.1",
                    "sourceIp": "203.0.113.5",
                    "userAgent": "agent",
                },
            },
            "body": body,
            "isBase64Encoded": is_base64_encoded,
        }
        event.update(overrides)
        return event

    return _http_api_event


@pytest.fixture
def echo_handler():
    """Handler returning the request body with fixed response headers."""

    def _handler(event, context):
        return {
            "statusCode": 200,
            "headers": {
                "RspHeader1": "RspHeaderValue1",
                "Content-Type": "application/json",
                "Content-Length": "1000",
            },
            "body": event.get("body"),
        }

    return _handler
