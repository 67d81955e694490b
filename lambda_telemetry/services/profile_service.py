"""
Profile Service

Sends user and company profile updates to the collector. Failures are
logged and reported as ``False``; they never propagate to the caller.
"""

from typing import Any, Iterable, List, Mapping, Union

from lambda_telemetry.models.profile_model import CompanyProfile, UserProfile
from lambda_telemetry.services.base_service import BaseService
from lambda_telemetry.services.collector_client import CollectorClient

UserInput = Union[UserProfile, Mapping[str, Any]]
CompanyInput = Union[CompanyProfile, Mapping[str, Any]]


class ProfileService(BaseService):
    """Service for user and company profile updates"""

    def __init__(self, client: CollectorClient):
        super().__init__()
        self.client = client

    def update_user(self, user: UserInput) -> bool:
        """
        Create or update one user profile.

        Args:
            user: UserProfile or a mapping with its fields

        Returns:
            True when the collector accepted the profile
        """
        try:
            profile = self._as_user(user)
            self.client.update_user(profile)
        except Exception as e:
            self.handle_service_error(e, "update_user")
            return False

        self.log_operation("update_user", user_id=profile.user_id)
        return True

    def update_users_batch(self, users: Iterable[UserInput]) -> bool:
        try:
            profiles: List[UserProfile] = [self._as_user(u) for u in users]
            self.client.update_users_batch(profiles)
        except Exception as e:
            self.handle_service_error(e, "update_users_batch")
            return False

        self.log_operation("update_users_batch", count=len(profiles))
        return True

    def update_company(self, company: CompanyInput) -> bool:
        """
        Create or update one company profile.

        Args:
            company: CompanyProfile or a mapping with its fields

        Returns:
            True when the collector accepted the profile
        """
        try:
            profile = self._as_company(company)
            self.client.update_company(profile)
        except Exception as e:
            self.handle_service_error(e, "update_company")
            return False

        self.log_operation("update_company", company_id=profile.company_id)
        return True

    def update_companies_batch(self, companies: Iterable[CompanyInput]) -> bool:
        try:
            profiles: List[CompanyProfile] = [self._as_company(c) for c in companies]
            self.client.update_companies_batch(profiles)
        except Exception as e:
            self.handle_service_error(e, "update_companies_batch")
            return False

        self.log_operation("update_companies_batch", count=len(profiles))
        return True

    @staticmethod
    def _as_user(user: UserInput) -> UserProfile:
        if isinstance(user, UserProfile):
            return user
        return UserProfile.model_validate(user)

    @staticmethod
    def _as_company(company: CompanyInput) -> CompanyProfile:
        if isinstance(company, CompanyProfile):
            return company
        return CompanyProfile.model_validate(company)
