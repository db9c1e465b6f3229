"""Prefix classifiers for the patchmark lexer.

Each classifier is a mixin that decides whether a block matches one prefix
rule. Classifiers are pure: they look at the block and return a match or
None, never mutating state.
"""

from patchmark.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from patchmark.lexer.classifiers.link_ref import (
    LinkRefClassifierMixin,
)
from patchmark.lexer.classifiers.list import (
    ListClassifierMixin,
)
from patchmark.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from patchmark.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "HeadingClassifierMixin",
    "LinkRefClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
