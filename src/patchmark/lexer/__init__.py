"""Block-level lexing for patchmark.

Architecture:
lexer/
├── __init__.py          # Re-exports split_blocks, PrefixClassifier
├── splitter.py          # Document -> blocks
├── prefix.py            # PrefixClassifier (mixin composition)
└── classifiers/         # One mixin per prefix rule
    ├── heading.py       # "# " .. "###### "
    ├── quote.py         # "> "
    ├── list.py          # "- ", "* ", "+ ", "1. "
    ├── thematic.py      # ---, ***, ___
    └── link_ref.py      # [name]: link "title"

Usage:
    >>> from patchmark.lexer import PrefixClassifier, split_blocks
    >>> classifier = PrefixClassifier()
    >>> [classifier.classify(b).tag for b in split_blocks("# Hi\\n\\ntext")]
    ['h1', 'p']

"""

from patchmark.lexer.prefix import PrefixClassifier
from patchmark.lexer.splitter import is_block_start, split_blocks

__all__ = ["PrefixClassifier", "is_block_start", "split_blocks"]
