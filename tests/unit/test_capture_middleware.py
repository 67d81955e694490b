"""
End-to-end tests for the handler wrappers and module-level entry points.
"""

import threading

import httpx
import pytest

from lambda_telemetry import client as telemetry_client
from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.config import settings as settings_module
from lambda_telemetry.config.settings import reload_settings
from lambda_telemetry.middleware import (
    CaptureMiddleware,
    capture_http_api_events,
    capture_proxy_events,
    wrap_proxy_handler,
)
from lambda_telemetry.models.outgoing_model import OutgoingRequest, OutgoingResponse
from lambda_telemetry.models.types import DeliveryStatus, EventShape, TransferEncoding
from lambda_telemetry.services.collector_client import CollectorClient
from lambda_telemetry.services.service_container import (
    TelemetryContainer,
    container,
    default_factory,
    get_telemetry_service,
)
from lambda_telemetry.services.telemetry_service import TelemetryService

from tests.conftest import BASE_TIME


@pytest.fixture
def global_container(collector, submitter, fixed_clock):
    """Point the process-wide container at the recording submitter."""

    def factory(options, settings):
        client = CollectorClient("test-app-id", transport=httpx.MockTransport(collector))
        return TelemetryService(options, client, submitter=submitter, clock=fixed_clock)

    container.reset()
    container.set_factory(factory)
    yield container
    container.reset()
    container.set_factory(default_factory)


# =============================================================================
# INCOMING CAPTURE
# =============================================================================


class TestCaptureMiddleware:
    """Wrapping handlers and capturing their exchanges."""

    def test_result_is_returned_unchanged(self, make_container, submitter, proxy_event, echo_handler):
        wrapped = CaptureMiddleware(container=make_container()).wrap(echo_handler)
        event = proxy_event()

        result = wrapped(event, None)

        assert result == echo_handler(event, None)
        assert len(submitter.events) == 1

    def test_captured_proxy_event(self, make_container, submitter, proxy_event, echo_handler):
        options = {
            "Api_Version": "1.0.0",
            "Identify_User": lambda req, rsp: "my_user_id",
            "Identify_Company": lambda req, rsp: "my_company_id",
            "Get_Session_Token": lambda req, rsp: "23jdf0owekfmcn4u3qypxg09w4d8ayrcdx8nu2ng]s98y18cx98q3yhwmnhcfx43f",
            "Get_Metadata": lambda req, rsp: {"foo": "proxy", "bar": "lambda"},
        }
        wrapped = CaptureMiddleware(options, container=make_container())(echo_handler)

        wrapped(proxy_event(), None)

        event = submitter.events[0]
        assert event.user_id == "my_user_id"
        assert event.company_id == "my_company_id"
        assert event.session_token.startswith("23jdf0owekfmcn4u3")
        assert event.metadata == {"foo": "proxy", "bar": "lambda"}
        assert event.request.api_version == "1.0.0"
        assert event.request.body == {"foo": "bar"}
        assert event.response.headers["Content-Length"] == "1000"

    def test_http_api_decorator(self, make_container, submitter, http_api_event):
        telemetry = CaptureMiddleware(shape=EventShape.HTTP_API, container=make_container())

        @telemetry
        def handler(event, context):
            return {"items": []}

        assert handler(http_api_event(), None) == {"items": []}

        event = submitter.events[0]
        assert event.request.verb == "GET"
        assert event.response.status == 200
        assert event.response.body == {"items": []}
        assert event.response.transfer_encoding == TransferEncoding.JSON

    def test_handler_exception_propagates_without_event(self, make_container, submitter, proxy_event):
        def failing(event, context):
            raise RuntimeError("handler failed")

        wrapped = CaptureMiddleware(container=make_container()).wrap(failing)

        with pytest.raises(RuntimeError, match="handler failed"):
            wrapped(proxy_event(), None)
        assert submitter.events == []

    def test_unreadable_event_does_not_fail_invocation(self, make_container, submitter):
        wrapped = CaptureMiddleware(container=make_container()).wrap(lambda event, context: "ok")

        assert wrapped(["not", "an", "event"], None) == "ok"
        assert submitter.events == []

    def test_capture_reports_delivery_result(self, make_container, proxy_event, echo_handler):
        middleware = CaptureMiddleware({"Should_Skip": lambda req, rsp: True}, container=make_container())
        event = proxy_event()

        result = middleware.capture(event, echo_handler(event, None))

        assert result.status == DeliveryStatus.SKIPPED

    def test_submit_failure_does_not_fail_invocation(self, make_container, submitter, proxy_event, echo_handler):
        submitter.error = RuntimeError("collector down")
        wrapped = CaptureMiddleware(container=make_container()).wrap(echo_handler)

        assert wrapped(proxy_event(), None)["statusCode"] == 200

    def test_wrapper_exposes_middleware(self, make_container, echo_handler):
        middleware = CaptureMiddleware(container=make_container())

        wrapped = middleware.wrap(echo_handler)

        assert wrapped.capture_middleware is middleware
        assert wrapped.__name__ == "_handler"

    def test_module_level_wrappers(self, global_container, submitter, proxy_event, http_api_event, echo_handler):
        wrap_proxy_handler(echo_handler)(proxy_event(), None)
        capture_http_api_events()(lambda event, context: None)(http_api_event(), None)
        assert isinstance(capture_proxy_events({"Log_Body": False}), CaptureMiddleware)

        assert len(submitter.events) == 2
        assert submitter.events[1].response.body is None


# =============================================================================
# CONTAINER
# =============================================================================


class TestTelemetryContainer:
    """Lazy, once-only service construction."""

    def test_first_options_win(self, make_container):
        telemetry = make_container()

        first = telemetry.get_service({"Api_Version": "1"})
        second = telemetry.get_service({"Api_Version": "2"})

        assert first is second
        assert first.options.api_version == "1"

    def test_concurrent_first_use_builds_once(self, collector, submitter):
        built = []

        def factory(options, settings):
            built.append(options)
            client = CollectorClient("app", transport=httpx.MockTransport(collector))
            return TelemetryService(options, client, submitter=submitter)

        telemetry = TelemetryContainer(factory)
        services = []

        threads = [threading.Thread(target=lambda: services.append(telemetry.get_service())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(built) == 1
        assert all(service is services[0] for service in services)
        telemetry.reset()
        assert not telemetry.initialized


# =============================================================================
# MODULE-LEVEL CLIENT
# =============================================================================


class TestModuleClient:
    """Profile updates and outgoing capture through the process-wide service."""

    def test_update_user_and_company(self, global_container, collector):
        assert telemetry_client.update_user({"user_id": "u1"}) is True
        assert telemetry_client.update_company({"company_id": "c1", "company_domain": "acme.com"}) is True
        assert telemetry_client.update_users_batch([{"user_id": "u2"}]) is True
        assert telemetry_client.update_companies_batch([{"company_id": "c2"}]) is True

        assert [r.url.path for r in collector.requests] == [
            "/v1/users",
            "/v1/companies",
            "/v1/users/batch",
            "/v1/companies/batch",
        ]
        assert collector.payloads()[1] == {"companyId": "c1", "companyDomain": "acme.com"}

    def test_outgoing_capture_disabled_by_default(self, global_container, submitter):
        request = OutgoingRequest(time=BASE_TIME, host="svc.internal")
        response = OutgoingResponse(time=BASE_TIME, status=200)

        assert telemetry_client.capture_outgoing(request, response) is None
        assert submitter.events == []

    def test_start_capture_outgoing(self, global_container, submitter):
        assert telemetry_client.start_capture_outgoing({"Debug": True}) is True

        request = OutgoingRequest(time=BASE_TIME, host="svc.internal", path="/v1/x", method="put")
        response = OutgoingResponse(time=BASE_TIME, status=204)
        result = telemetry_client.capture_outgoing(request, response, weight=2)

        assert result.sent
        assert submitter.events[0].direction == "Outgoing"
        assert submitter.events[0].weight == 2

    def test_start_capture_after_plain_initialization(self, global_container):
        container.get_service(CaptureOptions())

        assert telemetry_client.start_capture_outgoing() is False

    def test_get_telemetry_service_returns_shared_instance(self, global_container):
        assert get_telemetry_service() is global_container.get_service()

    def test_zero_weight_outgoing_event_is_sent(self, global_container, submitter):
        telemetry_client.start_capture_outgoing()
        request = OutgoingRequest(time=BASE_TIME, host="svc.internal")
        response = OutgoingResponse(time=BASE_TIME, status=200)

        result = telemetry_client.capture_outgoing(request, response, weight=0)

        assert result.sent
        assert submitter.events[0].weight == 0


# =============================================================================
# DEGRADED COLLECTOR AND ODD BODIES
# =============================================================================


class TestCaptureResilience:
    """The wrapped handler's result survives collector and body trouble."""

    def test_collector_timeout_returns_handler_result(self, proxy_event, echo_handler):
        def hanging_collector(request):
            raise httpx.ReadTimeout("collector did not answer", request=request)

        def factory(options, settings):
            client = CollectorClient("app", transport=httpx.MockTransport(hanging_collector))
            return TelemetryService(options, client)

        middleware = CaptureMiddleware(container=TelemetryContainer(factory))
        event = proxy_event()

        try:
            assert middleware.wrap(echo_handler)(event, None)["statusCode"] == 200

            result = middleware.capture(event, echo_handler(event, None))
            assert result.status == DeliveryStatus.FAILED
            assert "timed out" in result.error
        finally:
            middleware.container.reset()

    def test_deeply_nested_body_is_still_captured(self, make_container, submitter, proxy_event, echo_handler):
        body = "[" * 5000 + "]" * 5000
        wrapped = CaptureMiddleware(container=make_container()).wrap(echo_handler)

        wrapped(proxy_event(body=body), None)

        event = submitter.events[0]
        assert event.request.transfer_encoding == TransferEncoding.BASE64
        assert event.response.transfer_encoding == TransferEncoding.BASE64

    def test_default_collector_timeout_is_below_lambda_default(self):
        client = CollectorClient("app")
        try:
            assert client.http_client.timeout.read < 3
        finally:
            client.close()


class TestLoggingSetup:
    """The container leaves the host's logging alone unless asked."""

    @pytest.fixture
    def setup_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "lambda_telemetry.services.service_container.setup_logging",
            lambda level, log_format: calls.append((level, log_format)),
        )
        yield calls
        # rebuilt lazily from the restored environment
        settings_module._settings = None
        settings_module.get_settings.cache_clear()

    def test_logging_untouched_by_default(self, monkeypatch, make_container, setup_calls):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        reload_settings()

        make_container().get_service()

        assert setup_calls == []

    def test_logging_configured_when_requested(self, monkeypatch, make_container, setup_calls):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_FORMAT", "text")
        reload_settings()

        make_container().get_service()

        assert setup_calls == [("INFO", "text")]
