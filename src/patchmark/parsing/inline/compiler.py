"""Infix compiler.

Turns infix tokens into a markup string. Open formatters are tracked in a
set keyed by marker, not a stack: a marker opens its tag when it is not
open and closes it when it is. Each marker type toggles independently, so
interleaved spans such as ``**a_b**c_`` are emitted as written and are not
rearranged into a proper hierarchy. Formatters still open at the end of
the block are left for the tree builder to close.

"""

from html import escape

from patchmark.tokens import INFIX_FORMATTERS


def compile_infix(tokens: list[str], *, show_syntax: bool = False) -> str:
    """Compile infix tokens to markup.

    Args:
        tokens: Output of tokenize_infix
        show_syntax: Keep each marker inside its tags

    Returns:
        Markup string. Free text is escaped for &, < and >; quotes are left
        alone so the link and image passes can still read titles.

    Example:
        >>> compile_infix(["**", "a", "**"])
        '<strong>a</strong>'
        >>> compile_infix(["**", "a", "**"], show_syntax=True)
        '<strong>**a**</strong>'
    """
    parts: list[str] = []
    open_formatters: set[str] = set()

    for token in tokens:
        tag = INFIX_FORMATTERS.get(token)
        if tag is None:
            parts.append(escape(token, quote=False))
        elif token not in open_formatters:
            open_formatters.add(token)
            parts.append(tag.open_tag)
            if show_syntax:
                parts.append(token)
        else:
            open_formatters.discard(token)
            if show_syntax:
                parts.append(token)
            parts.append(tag.close_tag)

    return "".join(parts)


__all__ = ["compile_infix"]
