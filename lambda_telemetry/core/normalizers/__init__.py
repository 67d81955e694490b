"""
Normalizers package.

Body classification, URI reconstruction and header normalization shared
by both API Gateway request shapes.
"""

from lambda_telemetry.core.normalizers.body_classifier import (
    BodyClassifier,
    parse_json,
    is_base64_string,
    encode_base64,
)
from lambda_telemetry.core.normalizers.uri_builder import (
    build_query_string,
    build_proxy_uri,
    build_http_api_uri,
    build_outgoing_uri,
)
from lambda_telemetry.core.normalizers.header_normalizer import (
    normalize_headers,
    expand_headers,
    merge_headers,
)

__all__ = [
    "BodyClassifier",
    "parse_json",
    "is_base64_string",
    "encode_base64",
    "build_query_string",
    "build_proxy_uri",
    "build_http_api_uri",
    "build_outgoing_uri",
    "normalize_headers",
    "expand_headers",
    "merge_headers",
]
