"""Server-rendered HTML pages."""

from todai.pages.root import render_root_page

__all__ = ["render_root_page"]
