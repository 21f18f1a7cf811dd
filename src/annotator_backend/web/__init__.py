"""Server-rendered pages and the navigation header."""

from annotator_backend.web.header import NAV_LINKS, render_header
from annotator_backend.web.pages import router as pages_router

__all__ = ["NAV_LINKS", "pages_router", "render_header"]
