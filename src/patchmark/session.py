"""Per-document compile session.

A DocumentSession owns what the editor surface has to keep between calls:
the reference dictionary and the nodes currently on screen. Every node is
retained as returned, so later definitions can patch it in place.

Unlike compile_text, a session keeps one node per block, including a
childless placeholder for each reference definition, so ``content()``
reproduces every block of the document.

"""

from __future__ import annotations

from patchmark.compiler import compile_paragraph, reconstruct_text
from patchmark.config import CompileConfig, compile_config_context, get_compile_config
from patchmark.lexer import split_blocks
from patchmark.nodes import DATA_TEXT, CompiledNode, Reference, ReferenceDictionary
from patchmark.references import resolve_reference
from patchmark.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentSession:
    """Compile state for one document being edited.

    Usage:
        >>> session = DocumentSession()
        >>> session.load("[a][ref]\\n\\ndraft")
        >>> session.nodes[0].find("a").attrs["href"]
        ''
        >>> _ = session.recompile(1, '[ref]: http://x.com "T"')
        >>> session.nodes[0].find("a").attrs["href"]
        'http://x.com'

    """

    __slots__ = ("config", "nodes", "references")

    def __init__(
        self,
        references: ReferenceDictionary | None = None,
        *,
        config: CompileConfig | None = None,
    ) -> None:
        self.config = config
        self.references: ReferenceDictionary = {} if references is None else references
        self.nodes: list[CompiledNode] = []

    def load(self, text: str) -> None:
        """Replace the document with ``text``.

        The reference dictionary is cleared in place, so a dictionary passed
        to the constructor stays the one this session uses.
        """
        self.references.clear()
        self.nodes = []
        for block in split_blocks(text):
            self.nodes.append(self._compile(block))
        logger.debug("loaded %d block(s)", len(self.nodes))

    def recompile(self, index: int, block: str) -> CompiledNode:
        """Recompile the block at ``index`` after it was edited.

        Args:
            index: Position of the block in ``nodes``
            block: New source of the block

        Returns:
            The node now stored at ``index``.

        Raises:
            IndexError: If no block exists at ``index``.
        """
        if not -len(self.nodes) <= index < len(self.nodes):
            raise IndexError(f"block index {index} out of range")
        node = self._compile(block)
        self.nodes[index] = node
        return node

    def append(self, block: str) -> CompiledNode:
        """Compile a new block at the end of the document."""
        node = self._compile(block)
        self.nodes.append(node)
        return node

    def define(self, reference: Reference) -> None:
        """Register a reference injected outside the document text."""
        resolve_reference(self.references, reference, self.nodes)

    def content(self) -> str:
        """Document source rebuilt from the retained nodes."""
        return reconstruct_text(self.nodes)

    def _compile(self, block: str) -> CompiledNode:
        config = self.config or get_compile_config()
        with compile_config_context(config):
            compiled = compile_paragraph(block, self.references)
        if isinstance(compiled, Reference):
            self.define(compiled)
            return CompiledNode(tag=config.wrapper_tag, attrs={DATA_TEXT: block})
        return compiled


__all__ = ["DocumentSession"]
