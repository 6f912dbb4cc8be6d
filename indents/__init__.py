"""Parser for whitespace-indented outline documents.

    >>> from indents import parse_document, TO_MAPPING
    >>> parse_document("a\\n    b\\n    c\\n        d\\n", TO_MAPPING)
    {'a': ['b', {'c': ['d']}]}
"""

from .parser import ParseOptions, parse_document, parse_file, parse_lines
from .tree_builder import IndentError, IndentTreeBuilder
from .values import elval
from .views import TO_MAPPING, TO_OBJECT, TreeObject

__all__ = [
    "IndentError",
    "IndentTreeBuilder",
    "ParseOptions",
    "TO_MAPPING",
    "TO_OBJECT",
    "TreeObject",
    "elval",
    "parse_document",
    "parse_file",
    "parse_lines",
]
