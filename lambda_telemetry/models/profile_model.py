"""
User and company profile models sent to the collector's profile endpoints.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from lambda_telemetry.models.event_model import BaseRecordModel


class UserProfile(BaseRecordModel):
    """Profile attributes of an end user."""

    user_id: str = Field(..., min_length=1, max_length=255)
    company_id: Optional[str] = None
    modified_time: Optional[datetime] = None
    ip_address: Optional[str] = None
    session_token: Optional[str] = None
    user_agent_string: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    campaign: Optional[Dict[str, Any]] = None

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v):
        if not v.strip():
            raise ValueError("User ID cannot be empty")
        return v.strip()

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CompanyProfile(BaseRecordModel):
    """Profile attributes of a company (account)."""

    company_id: str = Field(..., min_length=1, max_length=255)
    company_domain: Optional[str] = None
    modified_time: Optional[datetime] = None
    ip_address: Optional[str] = None
    session_token: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    campaign: Optional[Dict[str, Any]] = None

    @field_validator("company_id")
    @classmethod
    def validate_company_id(cls, v):
        if not v.strip():
            raise ValueError("Company ID cannot be empty")
        return v.strip()

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
