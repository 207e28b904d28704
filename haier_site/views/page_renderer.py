"""Two-pass page rendering: content template first, then the layout."""

from collections.abc import Callable
from datetime import datetime

from haier_site.exceptions import TemplateRenderException
from haier_site.logging_config import get_logger, log_with_context
from haier_site.models.page import PageData
from haier_site.views.template_store import TemplateStore

logger = get_logger(__name__)


class PageRenderer:
    """Composes a page body into the shared layout.

    A broken content template degrades to an empty body. A broken layout is
    fatal for the request and surfaces as a TemplateException (HTTP 500).
    """

    def __init__(
        self,
        store: TemplateStore,
        layout_template: str = "layout.html",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.layout_template = layout_template
        self._clock = clock

    def render_page(self, template_id: str, data: PageData) -> bytes:
        """Render a content template inside the layout.

        Args:
            template_id: Content template identifier (e.g. 'homes.html')
            data: Page identity and title

        Returns:
            UTF-8 encoded HTML document

        Raises:
            TemplateLoadException: If the layout is missing or malformed
            TemplateRenderException: If the layout fails while executing
        """
        content = self.render_to_string(template_id, data)

        page = PageData(
            title=data.title,
            page=data.page,
            is_homes=data.is_homes,
            is_media=data.is_media,
            content=content,
            year=str(self._clock().year),
        )
        return self.render_layout(page)

    def render_to_string(self, template_id: str, data: PageData) -> str:
        """Render a content template, returning '' if it cannot be rendered."""
        try:
            template = self.store.load(template_id)
            return template.render(data.template_context())
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Content template failed, rendering empty content",
                template=template_id,
                error=str(e),
                error_type=type(e).__name__,
                event_type="content_render_error",
            )
            return ""

    def render_layout(self, data: PageData) -> bytes:
        """Render the layout with composed page data. Failures propagate."""
        template = self.store.load(self.layout_template)
        try:
            html = template.render(data.template_context())
        except Exception as e:
            raise TemplateRenderException(
                f"template: {self.layout_template}: {e}",
                details={"template": self.layout_template, "error_type": type(e).__name__},
            ) from e
        return html.encode("utf-8")
