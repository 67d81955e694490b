"""
Body classifier for captured request and response payloads.

Decides whether a raw body is JSON, base64 or opaque text. The platform's
``isBase64Encoded`` flag is only a hint: it is reconciled with the
content itself so that the same input always yields the same
``(value, transfer_encoding)`` pair.
"""

import base64
import json
import re
from typing import Any, Optional, Tuple, Union

import structlog

from lambda_telemetry.config.constants import BASE64_PATTERN
from lambda_telemetry.models.types import TransferEncoding

logger = structlog.get_logger(__name__)

_BASE64_RE = re.compile(BASE64_PATTERN)

Classified = Tuple[Any, TransferEncoding]


class _InvalidJson(ValueError):
    pass


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise _InvalidJson(name)


def parse_json(raw: str) -> Any:
    """
    Parse strict JSON.

    Raises:
        ValueError: When the text is not a JSON document
    """
    return json.loads(raw, parse_constant=_reject_constant)


def is_base64_string(raw: str) -> bool:
    return _BASE64_RE.fullmatch(raw) is not None


def encode_base64(raw: Union[str, bytes]) -> str:
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    return base64.b64encode(data).decode("ascii")


class BodyClassifier:
    """Classifies raw bodies into a value and a transfer encoding."""

    def __init__(self, log_body: bool = True, debug: bool = False):
        self.log_body = log_body
        self.debug = debug

    def classify(
            self,
            raw: Optional[Union[str, bytes]],
            declared_base64: bool = False
    ) -> Classified:
        """
        Classify a raw body.

        Args:
            raw: Body as received (str, bytes or None)
            declared_base64: Platform hint that the body is base64

        Returns:
            Tuple of (body value, transfer encoding)
        """
        if not self.log_body or not raw:
            return None, TransferEncoding.NONE

        text = self._as_text(raw)

        if declared_base64:
            if text is not None and is_base64_string(text):
                return text, TransferEncoding.BASE64

            # Hint and content disagree: JSON wins, but untagged
            parsed, ok = self._try_json(text)
            if ok:
                return parsed, TransferEncoding.NONE
            return self._fallback_base64(raw)

        parsed, ok = self._try_json(text)
        if ok:
            return parsed, TransferEncoding.JSON
        return self._fallback_base64(raw)

    @staticmethod
    def _as_text(raw: Union[str, bytes]) -> Optional[str]:
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    @staticmethod
    def _try_json(text: Optional[str]) -> Tuple[Any, bool]:
        if text is None:
            return None, False
        try:
            return parse_json(text), True
        except (ValueError, RecursionError):
            return None, False

    def _fallback_base64(self, raw: Union[str, bytes]) -> Classified:
        if self.debug:
            logger.info("Encoding body as base64", body_length=len(raw))
        return encode_base64(raw), TransferEncoding.BASE64
