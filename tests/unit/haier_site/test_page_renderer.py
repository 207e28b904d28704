"""Unit tests for two-pass page rendering."""

import re
from datetime import datetime

import pytest

from haier_site.exceptions import TemplateLoadException, TemplateRenderException
from haier_site.models.page import PageData
from haier_site.views.page_renderer import PageRenderer
from haier_site.views.template_store import TemplateStore

CONTENT_REGION = re.compile(r'<main id="content">(.*)</main>', re.DOTALL)


def content_region(html: bytes) -> str:
    match = CONTENT_REGION.search(html.decode("utf-8"))
    assert match is not None
    return match.group(1)


@pytest.fixture
def page_data():
    return PageData(page="homes", is_homes=True, title="Haier Homes | Kansas City Real Estate")


@pytest.fixture
def renderer(templates_dir):
    return PageRenderer(TemplateStore(templates_dir))


class TestComposition:
    """Content is rendered first and embedded into the layout."""

    def test_content_region_matches_inner_render(self, renderer, templates_dir, page_data):
        """Test the layout's content region reproduces the inner render exactly."""
        inner = TemplateStore(templates_dir).load("content.html").render(page_data.template_context())

        html = renderer.render_page("content.html", page_data)

        assert content_region(html) == inner
        assert inner == "<h1>Haier Homes | Kansas City Real Estate</h1><p>homes &amp; more</p>"

    def test_layout_markup_surrounds_content(self, renderer, page_data):
        """Test layout fields come from the page data."""
        html = renderer.render_page("content.html", page_data).decode("utf-8")

        assert html.startswith("<title>Haier Homes | Kansas City Real Estate</title>")
        assert "<nav>homes-active</nav>" in html

    def test_identity_flags_drive_navigation(self, renderer):
        """Test media pages highlight a different nav entry."""
        media = PageData(page="media", is_media=True, title="Media")

        html = renderer.render_page("content.html", media).decode("utf-8")

        assert "<nav>media-active</nav>" in html

    def test_incoming_content_is_replaced(self, renderer, page_data):
        """Test only the inner render ends up in the content region."""
        stale = page_data.model_copy(update={"content": "<b>stale</b>"})

        html = renderer.render_page("content.html", stale)

        assert "stale" not in html.decode("utf-8")

    def test_content_is_not_escaped_twice(self, renderer):
        """Test pre-rendered HTML is embedded as-is while the title is escaped."""
        data = PageData(page="homes", is_homes=True, title="Terms & Conditions")

        html = renderer.render_page("content.html", data).decode("utf-8")

        assert "<title>Terms &amp; Conditions</title>" in html
        assert content_region(html.encode()) == "<h1>Terms &amp; Conditions</h1><p>homes &amp; more</p>"

    def test_returns_utf8_bytes(self, renderer):
        """Test output is UTF-8 encoded."""
        html = renderer.render_page("content.html", PageData(title="Café"))

        assert isinstance(html, bytes)
        assert "Café".encode() in html


class TestYear:
    """Year is computed when the page is rendered."""

    def test_year_is_current_year(self, renderer, page_data):
        html = renderer.render_page("content.html", page_data).decode("utf-8")

        assert f"<footer>{datetime.now().year}</footer>" in html

    def test_year_uses_clock(self, templates_dir, page_data):
        renderer = PageRenderer(TemplateStore(templates_dir), clock=lambda: datetime(2031, 5, 1))

        html = renderer.render_page("content.html", page_data).decode("utf-8")

        assert "<footer>2031</footer>" in html


class TestContentFailures:
    """A broken content template renders an empty body."""

    def test_missing_content_template(self, renderer, page_data):
        html = renderer.render_page("missing.html", page_data)

        assert content_region(html) == ""
        assert b"<title>Haier Homes" in html

    def test_content_syntax_error(self, renderer, templates_dir, page_data):
        (templates_dir / "broken.html").write_text("{% for %}", encoding="utf-8")

        assert content_region(renderer.render_page("broken.html", page_data)) == ""

    def test_content_execution_error(self, renderer, templates_dir, page_data):
        (templates_dir / "explodes.html").write_text("<p>{{ missing.attr }}</p>", encoding="utf-8")

        assert content_region(renderer.render_page("explodes.html", page_data)) == ""

    def test_render_to_string_returns_empty(self, renderer, page_data):
        assert renderer.render_to_string("missing.html", page_data) == ""


class TestLayoutFailures:
    """A broken layout fails the whole render."""

    def test_missing_layout(self, templates_dir, page_data):
        renderer = PageRenderer(TemplateStore(templates_dir), layout_template="nolayout.html")

        with pytest.raises(TemplateLoadException) as exc_info:
            renderer.render_page("content.html", page_data)

        assert "template not found: nolayout.html" in str(exc_info.value)

    def test_layout_syntax_error(self, templates_dir, page_data):
        (templates_dir / "layout.html").write_text("{% if %}{{ content }}", encoding="utf-8")
        renderer = PageRenderer(TemplateStore(templates_dir))

        with pytest.raises(TemplateLoadException):
            renderer.render_page("content.html", page_data)

    def test_layout_execution_error(self, templates_dir, page_data):
        (templates_dir / "layout.html").write_text("{{ content }}{{ missing.attr }}", encoding="utf-8")
        renderer = PageRenderer(TemplateStore(templates_dir))

        with pytest.raises(TemplateRenderException) as exc_info:
            renderer.render_page("content.html", page_data)

        assert exc_info.value.status_code == 500
        assert "layout.html" in exc_info.value.message
