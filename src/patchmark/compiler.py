"""Block and document compilation.

compile_paragraph runs one block through the full pipeline:

    block -> PrefixClassifier -> tokenize_infix -> compile_infix
          -> compile_images -> compile_links -> build_node

and wraps the result in a node carrying the block source as ``data-text``.
compile_text splits a document, compiles every block, and applies each
reference definition to everything compiled before it.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from html import escape
from itertools import chain
from typing import NamedTuple

from patchmark.builder import build_node
from patchmark.config import get_compile_config
from patchmark.errors import CompileError
from patchmark.lexer import PrefixClassifier, split_blocks
from patchmark.nodes import (
    DATA_TEXT,
    CompiledNode,
    Reference,
    ReferenceDictionary,
)
from patchmark.parsing import compile_images, compile_infix, compile_links, tokenize_infix
from patchmark.references import resolve_reference
from patchmark.tokens import PrefixMatch, is_fenced
from patchmark.utils.logger import get_logger

logger = get_logger(__name__)

BLOCK_SEPARATOR = "\n\n"


class CompileResult(NamedTuple):
    """Nodes compiled from a document and the updated reference dictionary."""

    nodes: list[CompiledNode]
    references: ReferenceDictionary


def _open_tag(match: PrefixMatch) -> str:
    attrs = "".join(f' {name}="{escape(value, quote=True)}"' for name, value in match.attrs)
    return f"<{match.tag}{attrs}>"


def compile_paragraph(
    block: str, references: ReferenceDictionary
) -> CompiledNode | Reference:
    """Compile one block.

    Args:
        block: One block of source, as produced by split_blocks
        references: Reference dictionary used to resolve links and images.
            Not modified; a definition block is returned, not registered.

    Returns:
        A wrapper node (``data-text`` = block) around the compiled element,
        or a Reference record when the block is a reference definition.

    Raises:
        CompileError: If the compiled markup is not a single element.

    Example:
        >>> node = compile_paragraph("# Title", {})
        >>> node.children[0].tag, node.source
        ('h1', '# Title')
    """
    config = get_compile_config()
    classified = PrefixClassifier(config).classify(block)
    if isinstance(classified, Reference):
        return classified

    wrapper = CompiledNode(tag=config.wrapper_tag, attrs={DATA_TEXT: block})
    if classified.void:
        wrapper.children.append(CompiledNode(tag=classified.tag))
        return wrapper

    content = classified.content
    # Fencing is judged on the block without its marker, in both syntax modes
    if is_fenced(block[len(classified.marker) :]):
        markup = escape(content, quote=False)
    else:
        markup = compile_infix(tokenize_infix(content), show_syntax=config.show_syntax)
        markup = compile_images(markup, references)
        markup = compile_links(markup, references)

    try:
        element = build_node(f"{_open_tag(classified)}{markup}</{classified.tag}>")
    except CompileError as e:
        raise CompileError(e.message, block) from e

    wrapper.children.append(element)
    return wrapper


def compile_text(
    text: str,
    references: ReferenceDictionary | None = None,
    *,
    patch_targets: Iterable[CompiledNode] = (),
) -> CompileResult:
    """Compile a whole document.

    Args:
        text: Document source
        references: Reference dictionary for the editing session. Mutated in
            place and returned; a new one is created if omitted.
        patch_targets: Nodes from earlier calls that reference definitions
            in this document should also patch

    Returns:
        CompileResult with the compiled nodes (definitions produce none) and
        the same reference dictionary.

    Example:
        >>> refs = {}
        >>> first = compile_text("[a][ref]", refs)
        >>> compile_text('[ref]: http://x.com "T"', refs, patch_targets=first.nodes)
        CompileResult(nodes=[], references={'ref': ReferenceData(link='http://x.com', title='T')})
        >>> first.nodes[0].find("a").attrs["href"]
        'http://x.com'
    """
    if references is None:
        references = {}
    retained = list(patch_targets)

    nodes: list[CompiledNode] = []
    for block in split_blocks(text):
        compiled = compile_paragraph(block, references)
        if isinstance(compiled, Reference):
            resolve_reference(references, compiled, chain(retained, nodes))
        else:
            nodes.append(compiled)

    logger.debug("compiled %d node(s), %d reference(s) known", len(nodes), len(references))
    return CompileResult(nodes=nodes, references=references)


def reconstruct_text(nodes: Sequence[CompiledNode]) -> str:
    """Rebuild document source from the ``data-text`` of compiled nodes.

    Blocks are joined with a blank line. Nodes without ``data-text`` are
    skipped.
    """
    return BLOCK_SEPARATOR.join(node.source for node in nodes if node.source is not None)


__all__ = [
    "BLOCK_SEPARATOR",
    "CompileResult",
    "compile_paragraph",
    "compile_text",
    "reconstruct_text",
]
