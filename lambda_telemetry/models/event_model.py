"""
Event record models.

Canonical telemetry records built for every captured request/response
pair. Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lambda_telemetry.models.types import Direction, TransferEncoding


class BaseRecordModel(BaseModel):
    """Base model for collector records with camelCase serialization."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """
        Convert the record to the collector's JSON shape.

        Returns:
            Dictionary with camelCase keys and ISO-8601 timestamps
        """
        return self.model_dump(mode="json", by_alias=True)


class RequestRecord(BaseRecordModel):
    """Semantic snapshot of the captured request."""

    time: datetime
    uri: str
    verb: str
    api_version: Optional[str] = None
    ip_address: Optional[str] = None
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Any = None
    transfer_encoding: TransferEncoding = TransferEncoding.NONE


class ResponseRecord(BaseRecordModel):
    """Semantic snapshot of the captured response."""

    time: datetime
    status: int
    ip_address: Optional[str] = None
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Any = None
    transfer_encoding: TransferEncoding = TransferEncoding.NONE


class EventRecord(BaseRecordModel):
    """One captured request/response exchange."""

    request: RequestRecord
    response: ResponseRecord
    session_token: Optional[str] = None
    user_id: Optional[str] = None
    company_id: Optional[str] = None
    metadata: Any = None
    direction: Direction = Direction.INCOMING
    weight: int = Field(default=1, ge=0)
    # Reserved by the collector schema
    tags: Optional[str] = None
