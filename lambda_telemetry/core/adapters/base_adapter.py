"""
Base request adapter.

Abstract base class giving the event assembler one view over both API
Gateway request shapes: headers, URI, method, body with its base64 hint,
source IP and the platform-provided identity. The assembler and the
classifier are written once against this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, Union

from lambda_telemetry.models.types import EventShape


class GatewayResponseView(Protocol):
    """Minimal response view used by the assembler."""

    status_code: int
    headers: Dict[str, Any]
    body: Optional[Union[str, bytes]]
    is_base64_encoded: bool


class BaseRequestAdapter(ABC):
    """
    Abstract base class for raw request adapters.

    Subclasses parse the raw Lambda event in their constructor and must
    implement:
        - shape: which API Gateway payload format they read
        - uri: the reconstructed request URI
        - read_response(): parse the handler's return value
    """

    def __init__(self, raw_event: Any):
        self.raw_event = raw_event

    @property
    @abstractmethod
    def shape(self) -> EventShape:
        """Payload format this adapter reads."""

    @property
    @abstractmethod
    def headers(self) -> Dict[str, Any]:
        """Single-value request headers."""

    @property
    @abstractmethod
    def uri(self) -> str:
        """Full request URI rebuilt from headers, path and query."""

    @property
    @abstractmethod
    def method(self) -> str:
        """HTTP verb."""

    @property
    @abstractmethod
    def body(self) -> Optional[str]:
        """Raw request body."""

    @property
    @abstractmethod
    def is_base64_hint(self) -> bool:
        """Platform claim that the body is base64 encoded."""

    @property
    @abstractmethod
    def source_ip(self) -> Optional[str]:
        """Caller IP as seen by API Gateway, None when absent."""

    @property
    @abstractmethod
    def platform_user_id(self) -> Optional[str]:
        """Identity resolved by the platform authorizer, None when absent."""

    @abstractmethod
    def read_response(self, result: Any) -> GatewayResponseView:
        """Parse the wrapped handler's return value."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(method={self.method!r}, uri={self.uri!r})"
