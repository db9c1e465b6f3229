"""Reference definition classifier mixin.

Recognizes ``[name]: link "title"`` lines. The title is optional and both
link and title default to the empty string.
"""

import re

from patchmark.nodes import Reference, ReferenceData

_DEFINITION_START = re.compile(r"^\[.*?\]:")
_DEFINITION = re.compile(
    r'^\[(?P<name>[^\]]*)\]:\s*(?P<link>[^\s"]*)\s*(?:"(?P<title>[^"]*)")?'
)


class LinkRefClassifierMixin:
    """Mixin providing reference definition classification."""

    def _try_classify_reference_def(self, block: str) -> Reference | None:
        """Try to classify block as a reference definition.

        Args:
            block: Block source

        Returns:
            Reference record if the block defines a name, None otherwise.
            "[]: x" defines the empty name that "![alt]" and "[text][]" use.
        """
        if _DEFINITION_START.match(block) is None:
            return None

        match = _DEFINITION.match(block)
        if match is None:
            return None

        return Reference(
            name=match.group("name"),
            data=ReferenceData(
                link=match.group("link") or "",
                title=match.group("title") or "",
            ),
        )
