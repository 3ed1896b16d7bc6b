"""
Jinja helpers shared by every page template.
"""
from datetime import date, datetime
from typing import Union

from markupsafe import Markup


def safe_html(value) -> Markup:
    """Mark content from the database as trusted HTML so Jinja embeds it verbatim."""
    return Markup(value or "")


def active_class(active: str, target: str) -> str:
    """Return the nav CSS class for ``target`` given the page's active tab."""
    return "active" if active == target else ""


def format_date(value: Union[date, str]) -> str:
    """Format a date (or YYYY-MM-DD string) for display."""
    if isinstance(value, str):
        value = datetime.strptime(value, "%Y-%m-%d").date()
    return value.strftime("%B %d, %Y")


def register_template_helpers(app):
    """Expose the helpers to the app's Jinja environment."""
    app.jinja_env.filters["safe_html"] = safe_html
    app.jinja_env.globals["active_class"] = active_class
    app.jinja_env.globals["format_date"] = format_date
    return app
