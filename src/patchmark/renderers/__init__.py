"""patchmark renderers.

Renderers convert compiled nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders compiled nodes to HTML using StringBuilder pattern

"""

from patchmark.renderers.html import HtmlRenderer, render_html

__all__ = ["HtmlRenderer", "render_html"]
