"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits. Every route gets the
default limit through SlowAPIMiddleware; the login endpoint carries its
own, stricter limit.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

DEFAULT_RATE_LIMIT = settings.rate_limit_default
LOGIN_RATE_LIMIT = settings.rate_limit_login


def client_key(request: Request) -> str:
    """Identify the client a request is counted against."""
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return get_remote_address(request)


limiter = Limiter(key_func=client_key, default_limits=[DEFAULT_RATE_LIMIT])


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Return a 429 in the standard ``{success, message}`` envelope."""
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": "Too many requests, please try again later",
            "detail": str(exc.detail),
        },
    )
