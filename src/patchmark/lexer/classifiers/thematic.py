"""Horizontal rule classifier mixin."""

import re

from patchmark.tokens import PrefixMatch

_RULE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_thematic_break(self, block: str) -> PrefixMatch | None:
        """Try to classify block as a horizontal rule.

        A rule is a run of 3 or more of the same character (-, * or _)
        with nothing else on the line, not even spaces.

        Returns:
            Void PrefixMatch for hr, None otherwise.
        """
        if _RULE.match(block) is None:
            return None
        return PrefixMatch(tag="hr", content="", marker=block, void=True)
