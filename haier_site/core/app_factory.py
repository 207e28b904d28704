"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from haier_site import __version__
from haier_site.config import Settings, get_settings
from haier_site.core.lifespan import lifespan
from haier_site.core.middleware import setup_middleware
from haier_site.logging_config import get_logger, log_with_context
from haier_site.middleware.error_handlers import register_error_handlers
from haier_site.routers import contact_router, health_router, view_router
from haier_site.views.page_renderer import PageRenderer
from haier_site.views.template_store import TemplateStore

logger = get_logger(__name__)

# Static assets are also reachable below the section pages
STATIC_PREFIXES = ("/static", "/homes/static", "/media/static")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with (defaults to the process singleton)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Haier Homes",
        description="Personal website for Haier Homes and Haier Media.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    store = TemplateStore(settings.templates_dir, cache=settings.template_cache)
    app.state.page_renderer = PageRenderer(store, layout_template=settings.layout_template)
    log_with_context(
        logger,
        "info",
        "Template store configured",
        templates_dir=str(settings.templates_dir),
        cache=settings.template_cache,
        event_type="templates_config",
    )

    limiter = setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(view_router.router, tags=["views"])
    app.include_router(contact_router.build_router(limiter, settings), tags=["contact"])
    app.include_router(health_router.router, tags=["health"])

    static_files = StaticFiles(directory=str(settings.static_dir))
    for prefix in STATIC_PREFIXES:
        app.mount(prefix, static_files, name=prefix.strip("/").replace("/", "_"))

    return app
