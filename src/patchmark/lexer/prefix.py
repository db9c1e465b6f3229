"""Prefix classifier.

Classifies one block by its leading marker. Rules are tried in priority
order and the first match wins:

1. heading (h1-h6)
2. block quote
3. list item (when enabled)
4. horizontal rule
5. reference definition
6. paragraph (fallback)

A reference definition yields a Reference record instead of a match; it
takes no further part in inline compilation.

"""

from __future__ import annotations

from patchmark.config import CompileConfig, get_compile_config
from patchmark.lexer.classifiers import (
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from patchmark.nodes import Reference
from patchmark.tokens import PrefixMatch


class PrefixClassifier(
    HeadingClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
    LinkRefClassifierMixin,
):
    """Classify blocks by prefix.

    Usage:
        >>> PrefixClassifier().classify("## Title")
        PrefixMatch(tag='h2', content='Title', marker='## ', attrs=(), void=False)

    Stateless apart from its config; one instance may classify any number
    of blocks.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CompileConfig | None = None) -> None:
        self._config = config or get_compile_config()

    def classify(self, block: str) -> PrefixMatch | Reference:
        """Classify a block.

        Args:
            block: One block as produced by split_blocks

        Returns:
            PrefixMatch for compilable blocks, Reference for definitions.
        """
        match = self._try_classify_heading(block) or self._try_classify_block_quote(block)
        if match is None and self._config.list_items_enabled:
            match = self._try_classify_list_item(block)
        if match is not None:
            return match

        rule = self._try_classify_thematic_break(block)
        if rule is not None:
            return rule

        reference = self._try_classify_reference_def(block)
        if reference is not None:
            return reference

        return PrefixMatch(tag="p", content=block)

    def _wrap(
        self,
        tag: str,
        block: str,
        marker: str,
        attrs: tuple[tuple[str, str], ...] = (),
    ) -> PrefixMatch:
        """Build a match, keeping the marker in the content if syntax is shown."""
        content = block if self._config.show_syntax else block[len(marker) :]
        return PrefixMatch(tag=tag, content=content, marker=marker, attrs=attrs)


__all__ = ["PrefixClassifier"]
