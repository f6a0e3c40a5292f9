from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_ats.core.settings import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit():
    """Per-client limit for scoring routes; a no-op when RATE_LIMIT_ENABLED is off."""
    if not settings.rate_limit_enabled:
        return lambda endpoint: endpoint
    return limiter.limit(
        settings.rate_limit,
        error_message=f"Scoring is limited to {settings.rate_limit} per client.",
    )
