"""
API Gateway event models.

Parses the raw dictionaries AWS Lambda hands to (and receives from) a
handler behind API Gateway. Two shapes are supported: the REST API proxy
event (payload format 1.0) and the HTTP API event (payload format 2.0).

API Gateway sends ``null`` for absent maps, so every map field tolerates
None and defaults to an empty dict. Unknown keys are ignored.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class GatewayModel(BaseModel):
    """Base model for API Gateway payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _empty_if_none(v):
    return {} if v is None else v


# ============================================================================
# REST API PROXY EVENTS (PAYLOAD FORMAT 1.0)
# ============================================================================

class ProxyIdentity(GatewayModel):
    source_ip: Optional[str] = None
    cognito_identity_id: Optional[str] = None
    user_agent: Optional[str] = None


class ProxyRequestContext(GatewayModel):
    request_id: Optional[str] = None
    stage: Optional[str] = None
    identity: ProxyIdentity = Field(default_factory=ProxyIdentity)

    @field_validator("identity", mode="before")
    @classmethod
    def default_identity(cls, v):
        return _empty_if_none(v)


class ProxyRequestEvent(GatewayModel):
    """REST API proxy integration request."""

    resource: Optional[str] = None
    path: str = ""
    http_method: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    multi_value_headers: Dict[str, List[str]] = Field(default_factory=dict)
    query_string_parameters: Dict[str, str] = Field(default_factory=dict)
    multi_value_query_string_parameters: Dict[str, List[str]] = Field(default_factory=dict)
    path_parameters: Dict[str, str] = Field(default_factory=dict)
    stage_variables: Dict[str, str] = Field(default_factory=dict)
    request_context: ProxyRequestContext = Field(default_factory=ProxyRequestContext)
    body: Optional[str] = None
    is_base64_encoded: bool = False

    @field_validator(
        "headers",
        "multi_value_headers",
        "query_string_parameters",
        "multi_value_query_string_parameters",
        "path_parameters",
        "stage_variables",
        "request_context",
        mode="before",
    )
    @classmethod
    def default_maps(cls, v):
        return _empty_if_none(v)

    @field_validator("path", "http_method", mode="before")
    @classmethod
    def default_strings(cls, v):
        return "" if v is None else v


class ProxyResponse(GatewayModel):
    """REST API proxy integration response."""

    status_code: int = 0
    headers: Dict[str, Any] = Field(default_factory=dict)
    multi_value_headers: Dict[str, List[str]] = Field(default_factory=dict)
    body: Optional[str] = None
    is_base64_encoded: bool = False

    @field_validator("headers", "multi_value_headers", mode="before")
    @classmethod
    def default_maps(cls, v):
        return _empty_if_none(v)

    @classmethod
    def from_handler_result(cls, result: Any) -> "ProxyResponse":
        """Parse a handler result; anything but a dict is an empty response."""
        if isinstance(result, dict):
            return cls.model_validate(result)
        return cls()


# ============================================================================
# HTTP API EVENTS (PAYLOAD FORMAT 2.0)
# ============================================================================

class HttpApiHttpContext(GatewayModel):
    method: str = ""
    path: Optional[str] = None
    protocol: Optional[str] = None
    source_ip: Optional[str] = None
    user_agent: Optional[str] = None


class CognitoIdentity(GatewayModel):
    identity_id: Optional[str] = None
    identity_pool_id: Optional[str] = None


class IamAuthorizer(GatewayModel):
    access_key: Optional[str] = None
    account_id: Optional[str] = None
    user_id: Optional[str] = None
    user_arn: Optional[str] = None
    cognito_identity: Optional[CognitoIdentity] = None


class HttpApiAuthorizer(GatewayModel):
    iam: Optional[IamAuthorizer] = None
    jwt: Optional[Dict[str, Any]] = None
    lambda_: Optional[Dict[str, Any]] = Field(default=None, alias="lambda")


class HttpApiRequestContext(GatewayModel):
    request_id: Optional[str] = None
    stage: Optional[str] = None
    http: HttpApiHttpContext = Field(default_factory=HttpApiHttpContext)
    authorizer: Optional[HttpApiAuthorizer] = None

    @field_validator("http", mode="before")
    @classmethod
    def default_http(cls, v):
        return _empty_if_none(v)


class HttpApiRequestEvent(GatewayModel):
    """HTTP API request (payload format 2.0)."""

    version: Optional[str] = None
    route_key: Optional[str] = None
    raw_path: str = ""
    raw_query_string: str = ""
    cookies: List[str] = Field(default_factory=list)
    headers: Dict[str, str] = Field(default_factory=dict)
    query_string_parameters: Dict[str, str] = Field(default_factory=dict)
    path_parameters: Dict[str, str] = Field(default_factory=dict)
    stage_variables: Dict[str, str] = Field(default_factory=dict)
    request_context: HttpApiRequestContext = Field(default_factory=HttpApiRequestContext)
    body: Optional[str] = None
    is_base64_encoded: bool = False

    @field_validator(
        "headers",
        "query_string_parameters",
        "path_parameters",
        "stage_variables",
        "request_context",
        mode="before",
    )
    @classmethod
    def default_maps(cls, v):
        return _empty_if_none(v)

    @field_validator("cookies", mode="before")
    @classmethod
    def default_cookies(cls, v):
        return [] if v is None else v

    @field_validator("raw_path", "raw_query_string", mode="before")
    @classmethod
    def default_strings(cls, v):
        return "" if v is None else v


class HttpApiResponse(GatewayModel):
    """HTTP API response (payload format 2.0)."""

    status_code: int = 0
    headers: Dict[str, Any] = Field(default_factory=dict)
    multi_value_headers: Dict[str, List[str]] = Field(default_factory=dict)
    cookies: List[str] = Field(default_factory=list)
    body: Optional[str] = None
    is_base64_encoded: bool = False

    @field_validator("headers", "multi_value_headers", mode="before")
    @classmethod
    def default_maps(cls, v):
        return _empty_if_none(v)

    @field_validator("cookies", mode="before")
    @classmethod
    def default_cookies(cls, v):
        return [] if v is None else v

    @classmethod
    def from_handler_result(cls, result: Any) -> "HttpApiResponse":
        """
        Interpret a handler's return value the way API Gateway does.

        A dict carrying ``statusCode`` is a full response. Anything else is
        a bare payload: status 200 with the value as a JSON body (strings
        are passed through as-is).

        Args:
            result: Whatever the wrapped handler returned

        Returns:
            Parsed HttpApiResponse
        """
        if isinstance(result, dict) and "statusCode" in result:
            return cls.model_validate(result)

        if result is None:
            body = None
        elif isinstance(result, str):
            body = result
        else:
            body = json.dumps(result)

        return cls(
            status_code=200,
            headers={"content-type": "application/json"},
            body=body,
        )
