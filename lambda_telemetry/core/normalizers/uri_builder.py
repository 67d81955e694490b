"""
URI reconstruction for captured requests.

API Gateway never hands the handler a full URI, so it is rebuilt from the
forwarded-proto and host headers, the path and the query string. Proxy
events carry decoded query parameter maps that must be re-escaped; HTTP
API events carry the raw, already-encoded query string.
"""

from typing import List, Mapping, Optional
from urllib.parse import quote_plus

from lambda_telemetry.config.constants import (
    DEFAULT_HOST,
    DEFAULT_PATH,
    DEFAULT_SCHEME,
    HTTP_API_FORWARDED_PROTO_HEADER,
    HTTP_API_HOST_HEADER,
    PROXY_FORWARDED_PROTO_HEADER,
    PROXY_HOST_HEADER,
)


def build_query_string(
        query_params: Optional[Mapping[str, str]] = None,
        multi_value_query_params: Optional[Mapping[str, List[str]]] = None
) -> str:
    """
    Escape and join query parameters.

    The multi-value map is preferred when it holds anything; every value
    of every key is emitted, in mapping order.

    Args:
        query_params: Single-value parameter map
        multi_value_query_params: Multi-value parameter map

    Returns:
        Query string without the leading ``?`` (empty when no parameters)
    """
    pairs = []

    if multi_value_query_params:
        for key, values in multi_value_query_params.items():
            for value in values or []:
                pairs.append(f"{quote_plus(key)}={quote_plus(value)}")
    elif query_params:
        for key, value in query_params.items():
            pairs.append(f"{quote_plus(key)}={quote_plus(value)}")

    return "&".join(pairs)


def build_proxy_uri(
        headers: Optional[Mapping[str, str]],
        path: Optional[str],
        query_params: Optional[Mapping[str, str]] = None,
        multi_value_query_params: Optional[Mapping[str, List[str]]] = None
) -> str:
    """Rebuild the URI of a REST API proxy request."""
    headers = headers or {}

    uri = headers.get(PROXY_FORWARDED_PROTO_HEADER) or DEFAULT_SCHEME
    uri += "://"
    uri += headers.get(PROXY_HOST_HEADER) or DEFAULT_HOST
    uri += path or DEFAULT_PATH

    query_string = build_query_string(query_params, multi_value_query_params)
    if query_string:
        uri += "?" + query_string

    return uri


def build_http_api_uri(
        headers: Optional[Mapping[str, str]],
        raw_path: Optional[str],
        raw_query_string: Optional[str] = None
) -> str:
    """
    Rebuild the URI of an HTTP API request.

    An empty raw path replaces the whole URI with ``/`` rather than being
    appended to scheme and host. The raw query string is appended verbatim.
    """
    headers = headers or {}

    if raw_path:
        uri = headers.get(HTTP_API_FORWARDED_PROTO_HEADER) or DEFAULT_SCHEME
        uri += "://"
        uri += headers.get(HTTP_API_HOST_HEADER) or DEFAULT_HOST
        uri += raw_path
    else:
        uri = DEFAULT_PATH

    if raw_query_string:
        uri += "?" + raw_query_string

    return uri


def build_outgoing_uri(scheme: str, host: str, path: str, query: str = "") -> str:
    uri = f"{scheme or DEFAULT_SCHEME}://{host or DEFAULT_HOST}{path or DEFAULT_PATH}"
    if query:
        uri += "?" + query
    return uri
