"""Structural construction of compiled nodes.

Parses the markup string of one compiled block into a CompiledNode tree
with BeautifulSoup's ``html.parser`` builder. Misnested markup from the
toggle compiler is resolved the way that builder resolves it: an end tag
closes everything back to its most recent matching start tag, and end tags
with nothing open to close are ignored. Text is never dropped.

The markup must produce exactly one root element; anything else is a
CompileError.

"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag

from patchmark.errors import CompileError
from patchmark.nodes import CompiledNode


def _convert(tag: Tag) -> CompiledNode:
    node = CompiledNode(tag=tag.name, attrs={k: str(v) for k, v in tag.attrs.items()})
    for child in tag.children:
        if isinstance(child, Tag):
            node.children.append(_convert(child))
        elif isinstance(child, NavigableString) and child:
            node.children.append(str(child))
    return node


def build_node(markup: str) -> CompiledNode:
    """Build one node from compiled markup.

    Args:
        markup: Markup for exactly one element, e.g. ``<p>a <em>b</em></p>``

    Returns:
        The root element as a CompiledNode.

    Raises:
        CompileError: If the markup is empty, has top-level text, or has
            more than one top-level element.
    """
    soup = BeautifulSoup(markup.strip(), "html.parser", multi_valued_attributes=None)

    roots: list[Tag] = []
    for child in soup.contents:
        if isinstance(child, Tag):
            roots.append(child)
        elif str(child).strip():
            raise CompileError("Compiled markup has text outside its root element", markup)

    if not roots:
        raise CompileError("Compiled markup has no root element", markup)
    if len(roots) > 1:
        raise CompileError(f"Compiled markup has {len(roots)} root elements", markup)

    return _convert(roots[0])


__all__ = ["build_node"]
