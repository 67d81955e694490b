"""
Identity resolution for captured events.

Extracts user id, company id, session token and metadata through the
optional enrichment callbacks in CaptureOptions. Only the user id has a
platform fallback (the Cognito identity supplied by API Gateway).

A callback that raises never breaks the capture: the failure is logged
and the field keeps its zero value.
"""

from typing import Any, Callable, Optional, Tuple

import structlog

from lambda_telemetry.config.options import CaptureOptions
from lambda_telemetry.core.adapters.base_adapter import BaseRequestAdapter
from lambda_telemetry.core.exceptions import CallbackError

logger = structlog.get_logger(__name__)

_FAILED = object()


class IdentityResolver:
    """Resolves identity and metadata fields for one exchange."""

    def __init__(self, options: CaptureOptions):
        self.options = options

    def _invoke(self, name: str, callback: Callable, *args: Any) -> Any:
        try:
            return callback(*args)
        except Exception as e:
            error = CallbackError(name, e)
            logger.warning(
                "Enrichment callback failed",
                **error.to_dict()
            )
            return _FAILED

    def resolve_user_id(
            self,
            request: Any,
            response: Any,
            adapter: Optional[BaseRequestAdapter] = None
    ) -> Optional[str]:
        """
        Resolve the user id.

        The callback result is used as-is when configured (an empty string
        stays empty). Without a callback, or when it fails, the platform
        identity is used; None when there is none.
        """
        if self.options.identify_user is not None:
            result = self._invoke("identify_user", self.options.identify_user, request, response)
            if result is not _FAILED:
                return None if result is None else str(result)

        if adapter is not None:
            return adapter.platform_user_id
        return None

    def resolve_company_id(self, request: Any, response: Any) -> str:
        return self._resolve_string("identify_company", self.options.identify_company, request, response)

    def resolve_session_token(self, request: Any, response: Any) -> str:
        return self._resolve_string("get_session_token", self.options.get_session_token, request, response)

    def resolve_metadata(self, request: Any, response: Any) -> Any:
        if self.options.get_metadata is None:
            return None

        result = self._invoke("get_metadata", self.options.get_metadata, request, response)
        return None if result is _FAILED else result

    def resolve_all(
            self,
            request: Any,
            response: Any,
            adapter: Optional[BaseRequestAdapter] = None
    ) -> Tuple[Optional[str], str, str, Any]:
        """Return (user_id, company_id, session_token, metadata)."""
        return (
            self.resolve_user_id(request, response, adapter),
            self.resolve_company_id(request, response),
            self.resolve_session_token(request, response),
            self.resolve_metadata(request, response),
        )

    def _resolve_string(
            self,
            name: str,
            callback: Optional[Callable],
            request: Any,
            response: Any
    ) -> str:
        if callback is None:
            return ""

        result = self._invoke(name, callback, request, response)
        if result is _FAILED or result is None:
            return ""
        return str(result)
