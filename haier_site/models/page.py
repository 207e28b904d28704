"""Page data passed to content and layout templates."""

from typing import Any

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field


class PageData(BaseModel):
    """Values one page render needs.

    ``content`` holds HTML that was already rendered from a content template;
    it is handed to Jinja2 as Markup so the layout embeds it unescaped.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(default="", description="Pre-rendered HTML fragment")
    title: str = Field(default="", description="Page title (plain text)")
    year: str = Field(default="", description="Current calendar year")
    page: str = Field(default="", description="Page identity used by the navigation")
    is_homes: bool = False
    is_media: bool = False

    def template_context(self) -> dict[str, Any]:
        """Build the Jinja2 render context."""
        context = self.model_dump()
        context["content"] = Markup(self.content)
        return context
