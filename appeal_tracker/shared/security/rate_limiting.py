"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits. Every route gets
the default limit through SlowAPIMiddleware; the administrative
bulk cancel carries its own tighter limit.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from appeal_tracker.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address, default_limits=[settings.rate_limit_default]
)


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Reject a throttled request in the common error shape.

    Must stay synchronous: SlowAPIMiddleware calls the registered handler
    directly and returns its result without awaiting it.
    """
    logger.warning(
        "Rate limit %s exceeded by %s on %s %s",
        exc.detail,
        get_remote_address(request),
        request.method,
        request.url.path,
    )
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
