"""
Core exceptions for the normalization engine.

Malformed bodies are never errors; they are routed through the body
classifier's fallback. These exceptions cover enrichment callbacks and
raw events that cannot be adapted at all.
"""

from typing import Dict, Any, Optional
from datetime import datetime, timezone


class CoreError(Exception):
    """Base exception for all normalization engine errors."""

    def __init__(
            self,
            message: str,
            error_code: Optional[str] = None,
            details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat()
        }


class CallbackError(CoreError):
    """Raised when a user-supplied enrichment callback fails."""

    def __init__(self, callback: str, error: Exception):
        super().__init__(
            message=f"Callback {callback} failed: {error}",
            error_code="CALLBACK_ERROR",
            details={
                "callback": callback,
                "error_type": type(error).__name__
            }
        )
        self.callback = callback
        self.original_error = error


class EventShapeError(CoreError):
    """Raised when a raw Lambda event cannot be read as the expected shape."""

    def __init__(self, shape: str, reason: str):
        super().__init__(
            message=f"Cannot read {shape} event: {reason}",
            error_code="EVENT_SHAPE_ERROR",
            details={"shape": shape, "reason": reason}
        )
        self.shape = shape
