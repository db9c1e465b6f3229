"""ATX heading classifier mixin."""

from patchmark.tokens import PrefixMatch


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _wrap(
        self,
        tag: str,
        block: str,
        marker: str,
        attrs: tuple[tuple[str, str], ...] = (),
    ) -> PrefixMatch:
        """Build a match for a prefixed block. Implemented by PrefixClassifier."""
        raise NotImplementedError

    def _try_classify_heading(self, block: str) -> PrefixMatch | None:
        """Try to classify block as a heading.

        Headings start with exactly 1-6 # characters followed by a space.
        "## Title" is level 2 and never level 1.

        Args:
            block: Block source

        Returns:
            PrefixMatch wrapping in h1-h6, None otherwise.
        """
        level = 0
        while level < len(block) and block[level] == "#":
            level += 1
            if level > 6:
                return None

        if level == 0 or block[level : level + 1] != " ":
            return None

        return self._wrap(f"h{level}", block, block[: level + 1])
