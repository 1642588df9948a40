"""
Health check router.

Provides a liveness endpoint that pings the document store.
No business logic. Returns a short status string.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from netstats.application.hosts.check_health import CheckHealthUseCase
from netstats.interfaces.hosts.dependencies import get_check_health_use_case
from netstats.interfaces.hosts.schemas import ErrorResponse
from netstats.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Health check",
    description="Pings the document store and reports whether it is reachable.",
)
@limiter.limit(default_rate_limit)
async def health_check(
    request: Request,
    use_case: CheckHealthUseCase = Depends(get_check_health_use_case),
) -> str:
    """Return the store liveness string."""
    return await use_case.execute()
