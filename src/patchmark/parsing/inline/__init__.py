"""Inline compilation: tokenizer, toggle compiler, image/link substitution."""

from patchmark.parsing.inline.compiler import compile_infix
from patchmark.parsing.inline.links import compile_images, compile_links
from patchmark.parsing.inline.tokenizer import tokenize_infix

__all__ = ["compile_images", "compile_infix", "compile_links", "tokenize_infix"]
