"""Jinja2 template configuration for the auth pages."""

from pathlib import Path

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Renders a pre-built fragment through the same layout every auth page extends
_LAYOUT_WRAPPER = templates.env.from_string(
    '{% extends "auth/layout.html" %}{% block content %}{{ children }}{% endblock %}'
)


def render_auth_layout(children: str) -> str:
    """
    Wrap an already-rendered fragment in the centered auth layout.

    The fragment is treated as opaque markup and inserted without escaping
    or any other transformation.

    Args:
        children: HTML fragment to place inside the layout

    Returns:
        Full HTML document

    Example:
        >>> html = render_auth_layout("<form>...</form>")
    """
    return _LAYOUT_WRAPPER.render(children=Markup(children))
