from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from cvscore.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-client limit for a scoring route; ``limit`` overrides RATE_LIMIT."""
    if not settings.rate_limit_enabled:
        def passthrough(func):
            return func

        return passthrough
    return limiter.limit(limit or settings.rate_limit)
