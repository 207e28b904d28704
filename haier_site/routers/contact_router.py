"""Contact form route: relays submissions to the mail provider."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from starlette.exceptions import HTTPException as StarletteHTTPException

from haier_site.config import Settings
from haier_site.dependencies import get_app_settings, get_mailer
from haier_site.exceptions import FormParseException
from haier_site.routers.view_router import ALL_METHODS
from haier_site.services import contact_service
from haier_site.services.mail_service import MailSender


async def read_form_values(request: Request) -> dict[str, Any]:
    """Collect submitted values, first occurrence wins.

    Form body values come before query string values.

    Raises:
        FormParseException: If the body cannot be parsed.
    """
    try:
        form = await request.form()
    except StarletteHTTPException as e:
        raise FormParseException(
            f"Could not parse contact form body: {e.detail}",
            details={"content_type": request.headers.get("content-type", "")},
        ) from e

    values: dict[str, Any] = {}
    for key, value in [*form.multi_items(), *request.query_params.multi_items()]:
        values.setdefault(key, value)
    return values


def build_router(limiter: Limiter, settings: Settings) -> APIRouter:
    """Create the contact router, rate limited by the app's own limiter.

    Args:
        limiter: Limiter stored on the app's state
        settings: Settings providing the contact rate limit

    Returns:
        Router serving /contact
    """
    router = APIRouter()

    @router.api_route("/contact", methods=ALL_METHODS, response_class=PlainTextResponse)
    @limiter.limit(settings.contact_rate_limit)
    async def contact(
        request: Request,
        mailer: MailSender = Depends(get_mailer),
        app_settings: Settings = Depends(get_app_settings),
    ):
        """Send a contact form submission by email.

        Always answers in plain text. Parse errors and honeypot hits both answer
        "Error parsing form"; provider failures answer "Error sending email".
        """
        values = await read_form_values(request)
        info = contact_service.parse_contact_info(values)
        await contact_service.submit_contact(info, mailer, app_settings)
        return PlainTextResponse(contact_service.THANK_YOU_MESSAGE)

    return router
