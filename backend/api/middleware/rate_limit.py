"""
Rate limiting using slowapi.

Login attempts are throttled per client IP to slow down password guessing;
every other route shares the default limit applied by SlowAPIMiddleware.
"""

import ipaddress
import logging

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from infrastructure.config.settings import settings

logger = logging.getLogger(__name__)


def _public_ip(value: str) -> str | None:
    """Return *value* if it parses as a non-private IP address, else None.

    Private and loopback addresses in forwarding headers are trivially
    spoofed, so they never replace the connection address.
    """
    try:
        addr = ipaddress.ip_address(value.strip())
    except ValueError:
        return None
    if addr.is_private or addr.is_loopback or addr.is_link_local:
        return None
    return str(addr)


def get_client_ip(request: Request) -> str:
    """Client IP from X-Forwarded-For / X-Real-IP, falling back to the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        candidate = _public_ip(forwarded.split(",")[0])
        if candidate:
            return candidate
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        candidate = _public_ip(real_ip)
        if candidate:
            return candidate
    return get_remote_address(request)


if settings.rate_limit_storage_uri.startswith("memory") and settings.is_production:
    logger.warning(
        "Rate limiter using in-memory storage; limits are per process in multi-worker deployments"
    )

limiter = Limiter(
    key_func=get_client_ip,
    storage_uri=settings.rate_limit_storage_uri,
    default_limits=[settings.default_rate_limit],
)
