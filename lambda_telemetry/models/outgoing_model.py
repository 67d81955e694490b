"""
Outgoing exchange models.

Pre-built request/response primitives for calls the instrumented service
makes to other services. No interception happens here; callers describe
the exchange and the assembler turns it into an event record.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

Body = Optional[Union[str, bytes]]


class OutgoingRequest(BaseModel):
    """An outbound request made by the instrumented service."""

    time: datetime
    scheme: str = "https"
    host: str
    path: str = "/"
    query: str = ""
    method: str = "GET"
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Body = None

    @field_validator("method")
    @classmethod
    def upper_method(cls, v):
        return v.upper()

    @field_validator("query")
    @classmethod
    def strip_question_mark(cls, v):
        return v.lstrip("?")


class OutgoingResponse(BaseModel):
    """The response received for an outbound request."""

    time: datetime
    status: int
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Body = None
