"""Infix tokenizer.

Splits block content into formatter markers and runs of free text in one
greedy pass. Doubled markers are formed only from two adjacent identical
characters; nothing is ever re-split or merged after the fact.

Invariant: ``"".join(tokenize_infix(s)) == s`` for every string.

"""

from patchmark.tokens import CODE_MARKER, DOUBLING_CHARS, is_fenced, is_formatter


def tokenize_infix(content: str) -> list[str]:
    """Tokenize block content for infix compilation.

    Args:
        content: Block content with any prefix marker already stripped

    Returns:
        Tokens in source order. Fenced code content is a single token.

    Example:
        >>> tokenize_infix("a **b** c")
        ['a ', '**', 'b', '**', ' c']
    """
    if is_fenced(content):
        return [content]

    tokens: list[str] = []
    for char in content:
        if not tokens:
            tokens.append(char)
        elif char in DOUBLING_CHARS:
            if tokens[-1] == char:
                tokens[-1] = char * 2
            else:
                tokens.append(char)
        elif char == CODE_MARKER:
            tokens.append(char)
        elif is_formatter(tokens[-1]):
            tokens.append(char)
        else:
            tokens[-1] += char

    return tokens


__all__ = ["tokenize_infix"]
