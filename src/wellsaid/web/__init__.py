"""Server-rendered pages for the authentication section."""

from src.wellsaid.web.templating import render_auth_layout, templates

__all__ = ["render_auth_layout", "templates"]
