"""
Rate Limiting for Campus Hub API
================================
Implements rate limiting using slowapi with in-process storage.

Limited endpoints:
- /enquiries: public admission enquiry form (RATE_LIMIT_ENQUIRY)
- /study-questions/generate: AI generation (RATE_LIMIT_GENERATION)
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from campushub.core.config import settings
from campushub.core.logging_config import logger


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key.

    Priority:
    1. Session user ID (set by the session dependency)
    2. IP address (for anonymous visitors)
    """
    user_id = getattr(request.state, 'user_id', None)
    if user_id:
        return f"user:{user_id}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    storage_uri="memory://",
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Return the standard error envelope with a Retry-After header"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_user_identifier(request)}: {exc.detail}"
    )

    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": {
                "code": "RATE_LIMITED",
                "message": "Too many requests. Please slow down.",
                "details": {"limit": str(exc.detail)},
            },
        },
        headers={"Retry-After": "60"},
    )


def enquiry_rate_limit():
    """Rate limit for the public enquiry form"""
    return limiter.limit(settings.RATE_LIMIT_ENQUIRY, key_func=get_user_identifier)


def ai_operation_rate_limit():
    """Rate limit for AI generation"""
    return limiter.limit(settings.RATE_LIMIT_GENERATION, key_func=get_user_identifier)
