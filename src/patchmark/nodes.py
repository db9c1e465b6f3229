"""Compiled node model for patchmark.

Unlike a typed AST, compiled nodes are a small HTML-like tree: a tag, an
attribute map and a list of children, where text is a plain ``str`` child.
Nodes are deliberately mutable: the reference resolver patches ``href``,
``src`` and ``title`` on nodes that were returned by earlier compile calls.

Node shape:
CompiledNode
├── tag          "div", "p", "h1", "a", "img", ...
├── attrs        {"data-text": "...", "href": "...", ...}
└── children     [CompiledNode | str, ...]

Reserved attributes (the contract with the editor surface):
- ``data-text``: verbatim source of the block, set on the block wrapper
- ``data-reference``: reference name a link or image is bound to

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

DATA_TEXT = "data-text"
DATA_REFERENCE = "data-reference"

# Elements that never have children
VOID_TAGS = frozenset(("hr", "img", "br"))


@dataclass(slots=True)
class ReferenceData:
    """Target of a named reference.

    Markdown: [name]: link "title"

    """

    link: str = ""
    title: str = ""


@dataclass(slots=True)
class Reference:
    """A reference definition produced by the prefix classifier.

    Returned instead of a node when a block defines a reference, so the
    caller can register it and patch earlier uses.

    """

    name: str
    data: ReferenceData


# Reference name -> target, exact case-sensitive match.
# Owned by the caller and mutated in place for a whole editing session.
type ReferenceDictionary = dict[str, ReferenceData]


@dataclass(slots=True)
class CompiledNode:
    """One element of compiled output."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[CompiledNode | str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated text of this node and all descendants."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, CompiledNode):
                parts.append(child.text)
            else:
                parts.append(child)
        return "".join(parts)

    @property
    def source(self) -> str | None:
        """Verbatim block source, if this node is a block wrapper."""
        return self.attrs.get(DATA_TEXT)

    @property
    def reference(self) -> str | None:
        """Reference name this node is bound to, if any."""
        return self.attrs.get(DATA_REFERENCE)

    def get(self, name: str, default: str = "") -> str:
        return self.attrs.get(name, default)

    def iter(self) -> Iterator[CompiledNode]:
        """Yield this node and every descendant element, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, CompiledNode):
                yield from child.iter()

    def find(self, tag: str) -> CompiledNode | None:
        """First element (self included) with the given tag."""
        for node in self.iter():
            if node.tag == tag:
                return node
        return None

    def find_all(self, tag: str) -> list[CompiledNode]:
        return [node for node in self.iter() if node.tag == tag]

    def iter_references(self, name: str) -> Iterator[CompiledNode]:
        """Yield every element bound to reference ``name``."""
        for node in self.iter():
            if node.attrs.get(DATA_REFERENCE) == name:
                yield node


__all__ = [
    "DATA_REFERENCE",
    "DATA_TEXT",
    "VOID_TAGS",
    "CompiledNode",
    "Reference",
    "ReferenceData",
    "ReferenceDictionary",
]
