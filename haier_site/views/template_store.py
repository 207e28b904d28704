"""Loads Jinja2 templates from the templates directory."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, TemplateSyntaxError, select_autoescape

from haier_site.exceptions import TemplateLoadException

# Jinja2's own default cache size, used when caching is switched on
CACHED_TEMPLATES = 400


class TemplateStore:
    """Resolves template identifiers to parsed Jinja2 templates.

    By default nothing is cached: every ``load`` reads and parses the file
    again, so edits show up on the next request. With ``cache=True`` parsed
    templates are kept until the process restarts.
    """

    def __init__(self, directory: Path | str, cache: bool = False):
        self.directory = Path(directory)
        self.cache = cache
        self._env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html", "htm"]),
            cache_size=CACHED_TEMPLATES if cache else 0,
            auto_reload=not cache,
        )

    def load(self, identifier: str) -> Template:
        """Load and parse a template.

        Args:
            identifier: Path relative to the templates directory (e.g. 'homes.html')

        Returns:
            Renderable template

        Raises:
            TemplateLoadException: If the template is missing, unreadable or malformed
        """
        try:
            return self._env.get_template(identifier)
        except TemplateNotFound as e:
            raise TemplateLoadException(
                f"template not found: {identifier}",
                details={"template": identifier, "directory": str(self.directory)},
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateLoadException(
                f"template: {identifier}:{e.lineno}: {e.message}",
                details={"template": identifier, "line": e.lineno},
            ) from e
        except (UnicodeDecodeError, OSError) as e:
            # TemplateNotFound is an OSError too, so this comes after it
            raise TemplateLoadException(
                f"template: {identifier}: {e}",
                details={"template": identifier, "error_type": type(e).__name__},
            ) from e
