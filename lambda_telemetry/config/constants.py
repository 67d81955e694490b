"""
Package constants.

This module defines constant values, header names and collector
endpoints used throughout the telemetry shim.
"""

from typing import Dict, Tuple

# Package Information
SERVICE_NAME = "lambda-telemetry"
SERVICE_VERSION = "1.0.0"
USER_AGENT = f"{SERVICE_NAME}/{SERVICE_VERSION}"

# Collector Configuration
DEFAULT_COLLECTOR_BASE_URL = "https://api.moesif.net"
DEFAULT_REQUEST_TIMEOUT = 1.0  # seconds
APPLICATION_ID_HEADER = "X-Moesif-Application-Id"

COLLECTOR_ENDPOINTS: Dict[str, str] = {
    "event": "/v1/events",
    "user": "/v1/users",
    "users_batch": "/v1/users/batch",
    "company": "/v1/companies",
    "companies_batch": "/v1/companies/batch",
}

# URI Reconstruction Defaults
DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PATH = "/"

# Proxy (V1) events carry headers as sent by the client
PROXY_FORWARDED_PROTO_HEADER = "X-Forwarded-Proto"
PROXY_HOST_HEADER = "Host"

# HTTP API (V2) events carry lower-cased header names
HTTP_API_FORWARDED_PROTO_HEADER = "x-forwarded-proto"
HTTP_API_HOST_HEADER = "host"

# Body classification
BASE64_PATTERN = r"^[A-Za-z0-9+/]+={0,2}$"

# Client IP lookup order (lower-cased header names)
CLIENT_IP_HEADERS: Tuple[str, ...] = (
    "x-client-ip",
    "x-forwarded-for",
    "cf-connecting-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-real-ip",
    "x-cluster-client-ip",
    "x-forwarded",
    "forwarded-for",
    "forwarded",
)

# Legacy option names accepted by CaptureOptions.from_mapping
LEGACY_OPTION_NAMES: Dict[str, str] = {
    "Debug": "debug",
    "Log_Body": "log_body",
    "Log_Body_Outgoing": "log_body_outgoing",
    "Api_Version": "api_version",
    "Identify_User": "identify_user",
    "Identify_Company": "identify_company",
    "Get_Session_Token": "get_session_token",
    "Get_Metadata": "get_metadata",
    "Should_Skip": "should_skip",
    "Mask_Event_Model": "mask_event_model",
    "Capture_Outgoing_Requests": "capture_outgoing_requests",
    "Capture_Outoing_Requests": "capture_outgoing_requests",
}
