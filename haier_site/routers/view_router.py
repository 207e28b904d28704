"""Page routes: each renders its content template inside the layout."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from haier_site.dependencies import get_page_renderer
from haier_site.models.page import PageData
from haier_site.views.page_renderer import PageRenderer

router = APIRouter()

# Pages answer every method the same way
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

HOMES_PAGE = PageData(page="homes", is_homes=True, title="Haier Homes | Kansas City Real Estate")
MEDIA_PAGE = PageData(page="media", is_media=True, title="Haier the Creator | Haier Media")
PRIVACY_PAGE = PageData(page="homes", is_homes=True, title="Privacy Policy | Haier Homes")
TERMS_PAGE = PageData(page="homes", is_homes=True, title="Terms & Conditions | Haier Homes")


def render_page_response(renderer: PageRenderer, template_id: str, data: PageData) -> HTMLResponse:
    """Render a page through the layout into an HTML response."""
    return HTMLResponse(content=renderer.render_page(template_id, data))


@router.api_route("/homes", methods=ALL_METHODS, response_class=HTMLResponse)
async def homes(renderer: PageRenderer = Depends(get_page_renderer)):
    """Render the real estate page."""
    return render_page_response(renderer, "homes.html", HOMES_PAGE)


@router.api_route("/media", methods=ALL_METHODS, response_class=HTMLResponse)
async def media(renderer: PageRenderer = Depends(get_page_renderer)):
    """Render the media production page."""
    return render_page_response(renderer, "media.html", MEDIA_PAGE)


@router.api_route("/privacy", methods=ALL_METHODS, response_class=HTMLResponse)
async def privacy(renderer: PageRenderer = Depends(get_page_renderer)):
    """Render the privacy policy."""
    return render_page_response(renderer, "privacy.html", PRIVACY_PAGE)


@router.api_route("/terms", methods=ALL_METHODS, response_class=HTMLResponse)
async def terms(renderer: PageRenderer = Depends(get_page_renderer)):
    """Render the terms and conditions."""
    return render_page_response(renderer, "terms.html", TERMS_PAGE)
