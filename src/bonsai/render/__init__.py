"""
Display adapters for grown trees.

HTML markup and plain text come straight from ``Grid.to_html`` and
``Grid.to_text``; Rich terminal output lives here.
"""

from bonsai.render.rich_text import DEFAULT_PALETTE, render_rich

__all__ = ["DEFAULT_PALETTE", "render_rich"]
