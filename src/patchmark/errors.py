"""Exception classes for patchmark.

Unresolved references and malformed reference definitions are not errors;
they degrade to empty attributes and plain paragraphs. The exceptions below
cover the failures that must reach the caller.
"""

from __future__ import annotations


class PatchmarkError(Exception):
    """Base exception for all patchmark errors.

    Subclass this for specific error categories.
    """

    pass


class CompileError(PatchmarkError):
    """A compiled block could not be turned into a single node.

    Raised by the tree builder when the compiled markup has no root element,
    or more than one, so content would otherwise be dropped or invented.
    """

    def __init__(self, message: str, block: str | None = None) -> None:
        """Initialize compile error with the offending block.

        Args:
            message: Error description
            block: Source block (or compiled markup) that failed, if known
        """
        self.message = message
        self.block = block

        if block is not None:
            preview = block if len(block) <= 40 else block[:37] + "..."
            super().__init__(f"{message}: {preview!r}")
        else:
            super().__init__(message)


class RenderError(PatchmarkError):
    """Error during HTML rendering.

    Raised when the renderer is handed something that is not a compiled node.
    """

    pass
