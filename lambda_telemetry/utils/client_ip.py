"""
Client IP resolution.

Finds the originating client address behind proxies and CDNs by walking
the well-known forwarding headers in priority order. Only syntactically
valid addresses are accepted.
"""

import ipaddress
from typing import Dict, List, Mapping, Optional, Sequence

from lambda_telemetry.config.constants import CLIENT_IP_HEADERS


def clean_ip(candidate: Optional[str]) -> Optional[str]:
    """
    Strip quotes, brackets and ports from a header value.

    Returns:
        The bare address when valid, None otherwise
    """
    if not candidate:
        return None

    value = candidate.strip().strip('"')
    if value.lower() == "unknown" or not value:
        return None

    if value.startswith("["):
        # [2001:db8::1]:443
        value = value[1:].split("]", 1)[0]
    elif value.count(":") == 1:
        # 203.0.113.7:8080
        value = value.split(":", 1)[0]

    try:
        ipaddress.ip_address(value)
    except ValueError:
        return None
    return value


def _forwarded_for(value: str) -> Optional[str]:
    # Forwarded: for=192.0.2.60;proto=http, for=198.51.100.17
    for element in value.split(","):
        for pair in element.split(";"):
            name, _, token = pair.strip().partition("=")
            if name.lower() == "for":
                ip = clean_ip(token)
                if ip:
                    return ip
    return None


class ClientIpResolver:
    """Resolves the client IP from multi-value request headers."""

    def __init__(self, header_order: Sequence[str] = CLIENT_IP_HEADERS):
        self.header_order = tuple(h.lower() for h in header_order)

    def resolve(
            self,
            headers: Optional[Mapping[str, List[str]]],
            fallback: Optional[str] = None
    ) -> Optional[str]:
        """
        Resolve the client IP.

        Args:
            headers: Header name to list of values; names are matched
                case-insensitively
            fallback: Address to use when no header yields one

        Returns:
            Client IP or ``fallback``
        """
        lowered: Dict[str, List[str]] = {}
        for name, values in (headers or {}).items():
            lowered.setdefault(name.lower(), []).extend(v for v in values if v)

        for name in self.header_order:
            for value in lowered.get(name, []):
                ip = self._from_header(name, value)
                if ip:
                    return ip

        return fallback

    @staticmethod
    def _from_header(name: str, value: str) -> Optional[str]:
        if name == "forwarded":
            return _forwarded_for(value)

        if name in ("x-forwarded-for", "x-forwarded", "forwarded-for"):
            for part in value.split(","):
                ip = clean_ip(part)
                if ip:
                    return ip
            return None

        return clean_ip(value)
