"""Reference resolver.

Forward references work without a second parse: a use of an unknown name
is emitted with empty targets plus ``data-reference``, and when the
definition is compiled later every element bound to that name is patched
in place. Patching reaches any node the caller still holds, including
nodes returned by earlier compile calls, so callers must keep the nodes
themselves rather than copies.

"""

from __future__ import annotations

from collections.abc import Iterable

from patchmark.nodes import CompiledNode, Reference, ReferenceDictionary
from patchmark.utils.logger import get_logger

logger = get_logger(__name__)

# Attribute that receives the reference link, by tag
_LINK_ATTRS = {"a": "href", "img": "src"}


def register_reference(references: ReferenceDictionary, reference: Reference) -> None:
    """Record a definition, replacing any earlier value for the same name."""
    if reference.name in references:
        logger.debug("redefining reference %r", reference.name)
    references[reference.name] = reference.data


def fix_references(nodes: Iterable[CompiledNode], reference: Reference) -> None:
    """Patch every element bound to ``reference.name``.

    Walks each node and all of its descendants. Matching elements get
    ``title`` overwritten, plus ``href`` on anchors and ``src`` on images.

    Args:
        nodes: Nodes to patch, typically everything compiled so far
        reference: The definition to apply
    """
    patched = 0
    for node in nodes:
        for element in node.iter_references(reference.name):
            element.attrs["title"] = reference.data.title
            link_attr = _LINK_ATTRS.get(element.tag)
            if link_attr is not None:
                element.attrs[link_attr] = reference.data.link
            patched += 1

    logger.debug("patched %d element(s) for reference %r", patched, reference.name)


def resolve_reference(
    references: ReferenceDictionary,
    reference: Reference,
    nodes: Iterable[CompiledNode],
) -> None:
    """Register a definition and patch ``nodes`` with it."""
    register_reference(references, reference)
    fix_references(nodes, reference)


__all__ = ["fix_references", "register_reference", "resolve_reference"]
