"""
Page Templates - the fixed set of page templates the site renders

All templates are parsed once at startup so a syntax error stops the server
from booting instead of surfacing on the first request.
"""

from typing import Dict, Iterable

from jinja2 import Environment, Template

PAGE_NAMES = ("index", "blog", "research", "resume", "research_detail")
LAYOUT = "base.html"


class PageTemplates:
    """Parsed Jinja templates keyed by logical page name."""

    def __init__(self, templates: Dict[str, Template]):
        self._templates = dict(templates)

    @classmethod
    def load(cls, jinja_env: Environment, names: Iterable[str] = PAGE_NAMES) -> "PageTemplates":
        """
        Parse every page template plus the shared layout.

        Args:
            jinja_env: Environment with the site's loader and helpers registered
            names: Logical page names, each backed by ``<name>.html``

        Returns:
            PageTemplates holding one parsed template per name

        Raises:
            jinja2.TemplateError: if any template is missing or fails to parse
        """
        jinja_env.get_template(LAYOUT)
        return cls({name: jinja_env.get_template(f"{name}.html") for name in names})

    def __getitem__(self, name: str) -> Template:
        return self._templates[name]

    @property
    def names(self):
        return tuple(self._templates)
