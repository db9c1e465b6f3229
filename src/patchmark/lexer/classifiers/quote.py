"""Block quote classifier mixin."""

from patchmark.tokens import PrefixMatch

QUOTE_MARKER = "> "


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _wrap(
        self,
        tag: str,
        block: str,
        marker: str,
        attrs: tuple[tuple[str, str], ...] = (),
    ) -> PrefixMatch:
        """Build a match for a prefixed block. Implemented by PrefixClassifier."""
        raise NotImplementedError

    def _try_classify_block_quote(self, block: str) -> PrefixMatch | None:
        """Classify a "> " line as a block quote."""
        if not block.startswith(QUOTE_MARKER):
            return None
        return self._wrap("blockquote", block, QUOTE_MARKER)
