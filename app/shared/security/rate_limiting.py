"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits.
Protects the credential endpoints against brute force and abuse.
The 429 response is built by the centralized error handlers.

The limiter is process-wide: route decorators bind to it at import
time, so configure_rate_limiting() applies to every app in the process
and the most recent call wins. The auth limit is read per request.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings, settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)

_auth_limit = settings.rate_limit_auth


def auth_rate_limit() -> str:
    """Current limit for the credential endpoints, e.g. "10/minute"."""
    return _auth_limit


def configure_rate_limiting(app_settings: Settings) -> Limiter:
    """Apply the rate limit settings of an app and return the limiter."""
    global _auth_limit
    limiter.enabled = app_settings.rate_limit_enabled
    _auth_limit = app_settings.rate_limit_auth
    return limiter
