"""
Unit tests for user and company profile updates.
"""

import httpx

from lambda_telemetry.models.profile_model import UserProfile
from lambda_telemetry.services.collector_client import CollectorClient
from lambda_telemetry.services.profile_service import ProfileService

from tests.conftest import CollectorRecorder


class TestProfileService:
    """Profile updates report success as a boolean."""

    def test_update_user_from_mapping(self, collector_client, collector):
        service = ProfileService(collector_client)

        assert service.update_user({"user_id": "u1", "company_id": "c1"}) is True
        assert collector.payloads() == [{"userId": "u1", "companyId": "c1"}]

    def test_update_user_accepts_camel_case_keys(self, collector_client, collector):
        assert ProfileService(collector_client).update_user({"userId": "u1"}) is True
        assert collector.payloads() == [{"userId": "u1"}]

    def test_update_user_from_model(self, collector_client, collector):
        assert ProfileService(collector_client).update_user(UserProfile(user_id=" u1 ")) is True
        assert collector.payloads()[0]["userId"] == "u1"

    def test_invalid_profile_is_rejected(self, collector_client, collector):
        service = ProfileService(collector_client)

        assert service.update_user({"user_id": "   "}) is False
        assert service.update_company({}) is False
        assert collector.requests == []

    def test_batches(self, collector_client, collector):
        service = ProfileService(collector_client)

        assert service.update_users_batch([{"user_id": "a"}, {"user_id": "b"}]) is True
        assert service.update_companies_batch([{"company_id": "c"}]) is True
        assert collector.payloads() == [
            [{"userId": "a"}, {"userId": "b"}],
            [{"companyId": "c"}],
        ]

    def test_invalid_batch_entry_rejects_whole_batch(self, collector_client, collector):
        assert ProfileService(collector_client).update_users_batch([{"user_id": "a"}, {}]) is False
        assert collector.requests == []

    def test_collector_failure_returns_false(self):
        client = CollectorClient(
            "app",
            transport=httpx.MockTransport(CollectorRecorder(status_code=503)),
        )

        assert ProfileService(client).update_company({"company_id": "c1"}) is False
