"""Middleware configuration."""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.util import get_remote_address

from haier_site.config import Settings
from haier_site.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> Limiter:
    """Configure request middleware for the application.

    Each app gets its own limiter so its settings and counters stay separate.

    Args:
        app: FastAPI application instance
        settings: Application settings

    Returns:
        Limiter instance for rate limiting
    """
    limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
    app.state.limiter = limiter

    log_with_context(
        logger,
        "info",
        "Configuring contact form rate limit",
        enabled=settings.rate_limit_enabled,
        limit=settings.contact_rate_limit,
        event_type="security_config",
    )

    return limiter
