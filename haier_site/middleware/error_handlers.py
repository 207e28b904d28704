"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from haier_site.exceptions import SiteException
from haier_site.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def site_exception_handler(request: Request, exc: SiteException) -> PlainTextResponse:
    """Answer site exceptions in plain text.

    The internal message and details are logged; only ``response_text`` is
    sent to the client. Parse errors and honeypot hits take this same path
    and produce the same body.
    """
    log_with_context(
        logger,
        "warning" if exc.status_code < 500 else "error",
        "Site error",
        error_code=exc.code.value,
        error_message=exc.message,
        error_details=exc.details,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="site_error",
    )

    return PlainTextResponse(exc.response_text, status_code=exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle unexpected exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Internal details stay in the logs
    return PlainTextResponse("Internal Server Error", status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    from slowapi import _rate_limit_exceeded_handler
    from slowapi.errors import RateLimitExceeded

    app.add_exception_handler(SiteException, site_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
