"""
Common enums used across the package.
"""

from enum import Enum


class TransferEncoding(str, Enum):
    """How a captured body value is represented."""
    JSON = "json"
    BASE64 = "base64"
    NONE = ""


class Direction(str, Enum):
    """Whether the exchange was received or initiated by the service."""
    INCOMING = "Incoming"
    OUTGOING = "Outgoing"


class EventShape(str, Enum):
    """Supported API Gateway request shapes."""
    PROXY = "proxy"
    HTTP_API = "http_api"


class DeliveryStatus(str, Enum):
    """Outcome of handing an event to the delivery gate."""
    SENT = "sent"
    SKIPPED = "skipped"
    DROPPED = "dropped"
    FAILED = "failed"
