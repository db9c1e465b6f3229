"""HTML renderer using StringBuilder pattern.

Renders compiled nodes back to an HTML string (outer HTML). Attributes are
written in insertion order, so a freshly compiled block renders with its
attributes in the order the compiler produced them.

Thread Safety:
Each render() call uses its own StringBuilder; a single HtmlRenderer can
be shared.
"""

import html
from collections.abc import Iterable

from patchmark.errors import RenderError
from patchmark.nodes import VOID_TAGS, CompiledNode
from patchmark.stringbuilder import StringBuilder
from patchmark.utils.logger import get_logger

logger = get_logger(__name__)


def html_escape(s: str) -> str:
    """Escape text content: <, >, & and double quotes, not single quotes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render compiled nodes to HTML.

    Usage:
        >>> from patchmark import compile_paragraph
        >>> HtmlRenderer().render(compile_paragraph("**a**", {}))
        '<div data-text="**a**"><p><strong>a</strong></p></div>'

    """

    __slots__ = ("_separator",)

    def __init__(self, *, separator: str = "\n") -> None:
        """Initialize renderer.

        Args:
            separator: Written between top-level nodes by render_many
        """
        self._separator = separator

    def render(self, node: CompiledNode) -> str:
        """Render one node and its descendants.

        Raises:
            RenderError: If node is not a CompiledNode.
        """
        sb = StringBuilder()
        self._render_node(node, sb)
        return sb.build()

    def render_many(self, nodes: Iterable[CompiledNode]) -> str:
        """Render a node list, e.g. the nodes of a CompileResult."""
        return self._separator.join(self.render(node) for node in nodes)

    def _render_node(self, node: object, sb: StringBuilder) -> None:
        if not isinstance(node, CompiledNode):
            raise RenderError(f"Cannot render {type(node).__name__}: expected CompiledNode")

        sb.append("<").append(node.tag)
        for name, value in node.attrs.items():
            sb.append(f' {name}="{html_escape(value)}"')
        sb.append(">")

        if node.tag in VOID_TAGS:
            if node.children:
                logger.debug("dropping children of void element <%s>", node.tag)
            return

        for child in node.children:
            if isinstance(child, str):
                sb.append(html_escape(child))
            else:
                self._render_node(child, sb)
        sb.append(f"</{node.tag}>")


def render_html(nodes: CompiledNode | Iterable[CompiledNode]) -> str:
    """Render a node, or a list of nodes separated by newlines."""
    renderer = HtmlRenderer()
    if isinstance(nodes, CompiledNode):
        return renderer.render(nodes)
    return renderer.render_many(nodes)


__all__ = ["HtmlRenderer", "html_escape", "render_html"]
