"""
patchmark — streaming lightweight-markup compiler with deferred references

Compiles lightweight markup into a list of HTML-like nodes, one per block.
Links and images may use references that are defined later in the
document, or in a later compile call: unresolved uses are emitted empty
and patched in place once the definition is compiled.

Quick Start:
    >>> from patchmark import compile_text
    >>> result = compile_text("# Hello, **World**!", {})
    >>> node = result.nodes[0]
    >>> node.children[0].tag
    'h1'

    >>> # Forward references across calls
    >>> refs = {}
    >>> first = compile_text("see [docs]", refs)
    >>> _ = compile_text('[docs]: https://example.com "Docs"', refs, patch_targets=first.nodes)
    >>> first.nodes[0].find("a").attrs["href"]
    'https://example.com'

    >>> # Or keep a session for an editor
    >>> from patchmark import DocumentSession
    >>> session = DocumentSession()
    >>> session.load("# Notes\\n\\nsee [docs]")

Installation:
    pip install patchmark            # compiler (BeautifulSoup for tree building)
    pip install patchmark[test]      # + pytest and hypothesis
"""

from collections.abc import Iterable

from patchmark.builder import build_node
from patchmark.compiler import (
    CompileResult,
    compile_paragraph,
    compile_text,
    reconstruct_text,
)
from patchmark.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from patchmark.errors import CompileError, PatchmarkError, RenderError
from patchmark.lexer import PrefixClassifier, split_blocks
from patchmark.nodes import (
    DATA_REFERENCE,
    DATA_TEXT,
    CompiledNode,
    Reference,
    ReferenceData,
    ReferenceDictionary,
)
from patchmark.parsing import compile_images, compile_infix, compile_links, tokenize_infix
from patchmark.references import fix_references, register_reference
from patchmark.renderers.html import HtmlRenderer, render_html
from patchmark.serialization import from_dict, from_json, to_dict, to_json
from patchmark.session import DocumentSession

__version__ = "0.1.0"


class Compiler:
    """Compiler bound to one configuration.

    Usage:
        >>> compiler = Compiler(CompileConfig(show_syntax=True))
        >>> node = compiler.compile_paragraph("**a**", {})
        >>> node.children[0].children[0].text
        '**a**'

    Each call activates the config through a ContextVar and restores the
    previous one afterwards, so compilers with different configs can be
    used side by side, including from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CompileConfig | None = None) -> None:
        self._config = config or CompileConfig()

    @property
    def config(self) -> CompileConfig:
        return self._config

    def compile_text(
        self,
        text: str,
        references: ReferenceDictionary | None = None,
        *,
        patch_targets: Iterable[CompiledNode] = (),
    ) -> CompileResult:
        """Compile a document; see patchmark.compiler.compile_text."""
        with compile_config_context(self._config):
            return compile_text(text, references, patch_targets=patch_targets)

    def compile_paragraph(
        self, block: str, references: ReferenceDictionary
    ) -> CompiledNode | Reference:
        """Compile one block; see patchmark.compiler.compile_paragraph."""
        with compile_config_context(self._config):
            return compile_paragraph(block, references)

    def fix_references(self, nodes: Iterable[CompiledNode], reference: Reference) -> None:
        """Patch nodes with a reference; see patchmark.references.fix_references."""
        fix_references(nodes, reference)

    def session(self, text: str = "") -> DocumentSession:
        """Start a DocumentSession compiled with this config."""
        session = DocumentSession(config=self._config)
        if text:
            session.load(text)
        return session


__all__ = [  # noqa: RUF022 — grouped by category
    # Version
    "__version__",
    # Core API
    "compile_text",
    "compile_paragraph",
    "fix_references",
    "reconstruct_text",
    "CompileResult",
    "Compiler",
    "DocumentSession",
    # Nodes
    "CompiledNode",
    "Reference",
    "ReferenceData",
    "ReferenceDictionary",
    "DATA_TEXT",
    "DATA_REFERENCE",
    # Pipeline stages
    "split_blocks",
    "PrefixClassifier",
    "tokenize_infix",
    "compile_infix",
    "compile_images",
    "compile_links",
    "build_node",
    "register_reference",
    # Rendering and serialization
    "HtmlRenderer",
    "render_html",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
    # Errors
    "PatchmarkError",
    "CompileError",
    "RenderError",
]
