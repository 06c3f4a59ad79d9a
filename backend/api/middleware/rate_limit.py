"""
Rate limiting middleware using slowapi.

Limits are keyed by client IP. Storage is Redis when ``REDIS_URL`` is set,
otherwise per-process memory.

Rate Limits:
- Login: 5 attempts per minute
- Registration: 3 attempts per minute
- AI generation (rewrite, SEO article, newspaper): 10 per minute
- Copilot chat: 30 per minute
- News search: 20 per minute
- Default: 100 requests per minute
"""

import ipaddress
import logging
import re

from starlette.requests import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from infrastructure.config.settings import settings

logger = logging.getLogger(__name__)

_IP_LIKE = re.compile(r"^[\d.:a-fA-F]+$")


def _is_valid_ip(value: str) -> bool:
    """Return True if *value* looks like a valid IPv4 or IPv6 address."""
    if not _IP_LIKE.match(value):
        return False
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        return False


def _is_private_ip(value: str) -> bool:
    """Return True if *value* is a private, loopback, or link-local address.

    Private IPs in X-Forwarded-For are untrustworthy: a client can spoof
    ``X-Forwarded-For: 127.0.0.1`` to escape its own bucket.
    """
    try:
        addr = ipaddress.ip_address(value)
        return addr.is_private or addr.is_loopback or addr.is_link_local
    except ValueError:
        return False


def _get_real_ip(request: Request) -> str:
    """Extract real client IP from proxy headers, falling back to remote address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        candidate = forwarded.split(",")[0].strip()
        if _is_valid_ip(candidate) and not _is_private_ip(candidate):
            return candidate
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        candidate = real_ip.strip()
        if _is_valid_ip(candidate) and not _is_private_ip(candidate):
            return candidate
    return get_remote_address(request)

# Format: "count/period" where period can be: second, minute, hour, day
RATE_LIMITS = {
    "login": "5/minute",
    "register": "3/minute",
    "generation": "10/minute",
    "chat": "30/minute",
    "news_search": "20/minute",
    "default": "100/minute",
}

_storage_uri = settings.redis_url if settings.redis_url else "memory://"

if not settings.redis_url and settings.environment == "production":
    logger.critical(
        "Rate limiter is using in-memory storage in production. "
        "Limits are per-process only. Set REDIS_URL in environment variables."
    )

limiter = Limiter(
    key_func=_get_real_ip,
    storage_uri=_storage_uri,
    default_limits=[RATE_LIMITS["default"]],
)


def get_rate_limit(endpoint: str) -> str:
    """
    Get rate limit configuration for a specific endpoint.

    Example:
        >>> get_rate_limit("login")
        "5/minute"
        >>> get_rate_limit("unknown")
        "100/minute"
    """
    return RATE_LIMITS.get(endpoint, RATE_LIMITS["default"])
