"""List item classifier mixin.

Lists are not grouped: every item line is its own block and compiles to a
standalone ``li`` element. Ordered items keep their number in ``value``.
"""

import re

from patchmark.tokens import PrefixMatch

_BULLET = re.compile(r"^[-*+] ")
_ORDERED = re.compile(r"^(\d+)\. ")


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _wrap(
        self,
        tag: str,
        block: str,
        marker: str,
        attrs: tuple[tuple[str, str], ...] = (),
    ) -> PrefixMatch:
        """Build a match for a prefixed block. Implemented by PrefixClassifier."""
        raise NotImplementedError

    def _try_classify_list_item(self, block: str) -> PrefixMatch | None:
        """Try to classify block as a bullet or ordered list item.

        Args:
            block: Block source

        Returns:
            PrefixMatch wrapping in li, None otherwise.
        """
        match = _BULLET.match(block)
        if match:
            return self._wrap("li", block, match.group(0))

        match = _ORDERED.match(block)
        if match:
            # "007. " is item 7
            number = match.group(1).lstrip("0") or "0"
            return self._wrap("li", block, match.group(0), (("value", number),))

        return None
