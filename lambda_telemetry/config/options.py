"""
Typed capture options.

Each capability (identity extraction, skip predicate, masking) is an
independently optional callable. Callbacks receive the raw Lambda event
and the raw handler response exactly as the handler saw them.
"""

from typing import Any, Callable, Dict, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from lambda_telemetry.config.constants import LEGACY_OPTION_NAMES

logger = structlog.get_logger(__name__)


class CaptureOptions(BaseModel):
    """Options controlling what is captured and how it is enriched."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    debug: bool = Field(default=False, description="Log gate decisions")
    log_body: bool = Field(default=True, description="Capture inbound bodies")
    log_body_outgoing: bool = Field(default=True, description="Capture outbound bodies")
    api_version: Optional[str] = None

    identify_user: Optional[Callable[[Any, Any], Optional[str]]] = None
    identify_company: Optional[Callable[[Any, Any], Optional[str]]] = None
    get_session_token: Optional[Callable[[Any, Any], Optional[str]]] = None
    get_metadata: Optional[Callable[[Any, Any], Optional[Dict[str, Any]]]] = None
    should_skip: Optional[Callable[[Any, Any], bool]] = None
    mask_event_model: Optional[Callable[[Any], Any]] = None

    capture_outgoing_requests: bool = False

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "CaptureOptions":
        """
        Build options from a mapping.

        Accepts both the field names of this model and the legacy
        ``Title_Case`` names (``Debug``, ``Log_Body``, ``Identify_User``...).
        Unknown keys are ignored.

        Args:
            options: Raw option mapping, may be None

        Returns:
            Parsed CaptureOptions
        """
        values: Dict[str, Any] = {}
        ignored = []

        for key, value in (options or {}).items():
            name = LEGACY_OPTION_NAMES.get(key, key)
            if name in cls.model_fields:
                values[name] = value
            else:
                ignored.append(key)

        if ignored:
            logger.debug("Ignoring unknown capture options", keys=sorted(ignored))

        return cls(**values)

    @classmethod
    def coerce(cls, options: Any) -> "CaptureOptions":
        """Accept a CaptureOptions instance, a mapping or None."""
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)
