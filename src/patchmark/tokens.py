"""Formatter tables for the patchmark pipeline.

Infix formatters are marker pairs that wrap a span inside a block
(**bold**, _italic_, ~~strike~~, `code`). Tokens produced by the infix
tokenizer are plain strings; a token is a formatter token exactly when it
is a key of INFIX_FORMATTERS.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HtmlTag:
    """Open/close tag pair emitted around a formatted span."""

    name: str

    @property
    def open_tag(self) -> str:
        return f"<{self.name}>"

    @property
    def close_tag(self) -> str:
        return f"</{self.name}>"


INFIX_FORMATTERS: dict[str, HtmlTag] = {
    "**": HtmlTag("strong"),
    "__": HtmlTag("strong"),
    "*": HtmlTag("em"),
    "_": HtmlTag("em"),
    "~~": HtmlTag("strike"),
    "`": HtmlTag("code"),
}

# Characters that merge with an identical single-character token
DOUBLING_CHARS = frozenset("*_~")

CODE_MARKER = "`"

# A block starting with this marker is compiled as one opaque token
FENCE_MARKER = "```"


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """A block classified by a prefix rule.

    Attributes:
        tag: Tag wrapping the whole block ("p", "h2", "blockquote", "hr", ...)
        content: Block text left for infix compilation
        marker: Stripped block marker ("## ", "> ", ...), the syntax token
        attrs: Extra attributes for the wrapping tag
        void: True when the block compiles to a childless element (rules)

    """

    tag: str
    content: str
    marker: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    void: bool = False


def is_formatter(token: str) -> bool:
    """True when token is a recognized infix formatter marker."""
    return token in INFIX_FORMATTERS


def is_fenced(content: str) -> bool:
    """True when content opens a fenced code block."""
    return content.startswith(FENCE_MARKER)


__all__ = [
    "CODE_MARKER",
    "DOUBLING_CHARS",
    "FENCE_MARKER",
    "INFIX_FORMATTERS",
    "HtmlTag",
    "PrefixMatch",
    "is_fenced",
    "is_formatter",
]
