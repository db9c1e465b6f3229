"""Block splitter.

Partitions raw text into an ordered list of blocks in a single pass with
no lookahead. Lines that start a block construct are emitted on their own;
everything else accumulates into a paragraph buffer that blank lines flush.

Multi-line constructs (tables, lists) come out as one block per line.

"""

import re

from patchmark.utils.logger import get_logger

logger = get_logger(__name__)

_BLOCK_MARKER = re.compile(r"^(#{1,6} |\d+\. |\* |\+ |- |> )")
_THEMATIC_BREAK = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")
_REFERENCE_DEF = re.compile(r"^\[.+\]:")
_TABLE_CELL = "|"


def is_block_start(line: str) -> bool:
    """True when line always forms a block of its own."""
    return (
        _BLOCK_MARKER.match(line) is not None
        or _THEMATIC_BREAK.match(line) is not None
        or _REFERENCE_DEF.match(line) is not None
        or _TABLE_CELL in line
    )


def split_blocks(text: str) -> list[str]:
    """Split a document into blocks.

    Args:
        text: Raw document text

    Returns:
        Blocks in order of appearance. Paragraph continuation lines are
        joined without a separator; blank lines are dropped.

    Example:
        >>> split_blocks("# Title\\nfirst\\nsecond\\n\\n---")
        ['# Title', 'firstsecond', '---']
    """
    blocks: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            blocks.append("".join(buffer))
            buffer.clear()

    for line in text.split("\n"):
        if is_block_start(line):
            flush()
            blocks.append(line)
        elif not line.strip():
            flush()
        else:
            buffer.append(line)
    flush()

    logger.debug("split %d characters into %d blocks", len(text), len(blocks))
    return blocks


__all__ = ["is_block_start", "split_blocks"]
