"""
Rate limiting configuration and setup.

Uses slowapi to apply a per-client limit to every endpoint.
Every request may open a database cursor, so clients are throttled
before they reach the store. Routes opt in with
`@limiter.limit(default_rate_limit)`; the limit string is read from
settings on each request.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from netstats.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def default_rate_limit() -> str:
    """Return the configured per-client limit, e.g. "60/minute"."""
    return settings.rate_limit_default


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the standard error shape.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
