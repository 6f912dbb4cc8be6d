# indents/parser.py
# Parses indented documents into trees.
#   text -> normalize_text -> tokenize -> IndentTreeBuilder -> view
# Expects tokens shaped like:
# {"type": "LINE", "value": str, "nesting": int}

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

from .normalizer import INDENT_UNIT, normalize_text
from .tokenizer import iter_lines, tokenize
from .tree_builder import IndentTreeBuilder
from .views import TO_OBJECT, as_view, check_mode

logger = logging.getLogger(__name__)


@dataclass
class ParseOptions:
    mode: str = TO_OBJECT
    indent_unit: str = INDENT_UNIT
    strip_comments: bool = True


def parse_lines(lines: Iterable[Tuple[int, Any]], mode: str = TO_OBJECT) -> Any:
    """Build a tree from already-normalized (depth, content) pairs."""
    check_mode(mode)
    builder = IndentTreeBuilder().accept_lines(lines)
    return as_view(builder.to_dict(), mode)


def parse_document(text: str, mode: str = TO_OBJECT, *, options: ParseOptions | None = None) -> Any:
    """
    Parse an indented document.

    ``mode`` selects the output view (``TO_OBJECT`` or ``TO_MAPPING``); when
    ``options`` is given its ``mode`` wins. Raises IndentError on the first
    malformed indentation.
    """
    opts = options or ParseOptions(mode=mode)
    check_mode(opts.mode)

    norm = normalize_text(text, indent_unit=opts.indent_unit, comments=opts.strip_comments)
    tokens = tokenize(norm)
    logger.debug("parsing %d lines (mode=%s)", len(tokens), opts.mode)

    return parse_lines(iter_lines(tokens), opts.mode)


def parse_file(path: Union[str, Path], mode: str = TO_OBJECT, *,
               encoding: str = "utf-8", options: ParseOptions | None = None) -> Any:
    text = Path(path).read_text(encoding=encoding)
    return parse_document(text, mode, options=options)
