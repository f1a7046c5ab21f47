"""Rate limiting service for the auth pages."""

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.wellsaid.config import settings

logger = logging.getLogger(__name__)


# Every endpoint here is reached before a session exists, so limits are per client IP
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],  # No global limits, applied per-endpoint
    storage_uri="memory://",
    enabled=settings.rate_limit_enabled,
)


class RateLimitTiers:
    """Rate limit tiers for the auth endpoints."""

    # Page renders
    DEFAULT = ["100 per minute", "1000 per hour"]

    # Form posts that reach the auth provider
    PUBLIC = ["20 per minute", "100 per hour"]


# Note: decorated endpoints must take a 'request: Request' parameter (slowapi requirement)
default_rate_limit = limiter.limit(";".join(RateLimitTiers.DEFAULT))
public_rate_limit = limiter.limit(";".join(RateLimitTiers.PUBLIC))
