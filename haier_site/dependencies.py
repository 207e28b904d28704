"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from haier_site.config import Settings
from haier_site.services.mail_service import MailSender
from haier_site.views.page_renderer import PageRenderer


async def get_app_settings(request: Request) -> Settings:
    """
    Get the Settings instance the app was created with.

    Raises:
        RuntimeError: If the app was not built by create_app.
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)

    if settings is None:
        raise RuntimeError("Settings not initialized. This should never happen.")

    return settings


async def get_mailer(request: Request) -> MailSender:
    """
    Get the mail sender created during app startup.

    Raises:
        RuntimeError: If the lifespan has not run.
    """
    mailer: MailSender | None = getattr(request.app.state, "mailer", None)

    if mailer is None:
        raise RuntimeError("Mailer not initialized.")

    return mailer


async def get_page_renderer(request: Request) -> PageRenderer:
    """
    Get the page renderer from app state.

    Raises:
        RuntimeError: If page renderer is not initialized.
    """
    renderer: PageRenderer | None = getattr(request.app.state, "page_renderer", None)

    if renderer is None:
        raise RuntimeError("Page renderer not initialized.")

    return renderer
