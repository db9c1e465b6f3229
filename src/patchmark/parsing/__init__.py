"""Inline parsing stages for patchmark.

Pipeline per block (after prefix classification):

    content -> tokenize_infix -> compile_infix -> compile_images -> compile_links

"""

from patchmark.parsing.inline import (
    compile_images,
    compile_infix,
    compile_links,
    tokenize_infix,
)

__all__ = ["compile_images", "compile_infix", "compile_links", "tokenize_infix"]
