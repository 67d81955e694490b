"""
Utilities package.

Logging setup and client IP resolution.
"""

from lambda_telemetry.utils.logger import setup_logging
from lambda_telemetry.utils.client_ip import ClientIpResolver, clean_ip

__all__ = [
    "setup_logging",
    "ClientIpResolver",
    "clean_ip",
]
