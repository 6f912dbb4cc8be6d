# indents/tokenizer.py
# Tokenizes normalized document text into flat tokens with nesting.
# Tokens:
#   {"type": "LINE", "value": str, "nesting": int}
# Input is expected to come from normalizer.normalize_text (indent unit already
# converted to tab markers, comments removed).

from __future__ import annotations
import re
from typing import Dict, Iterator, List, Tuple

from .normalizer import INDENT_MARKER

# indent markers anywhere in a line are dropped from its content
RE_MARKERS = re.compile(re.escape(INDENT_MARKER) + "+")

# --------------------------- Helpers & emitters -------------------------------

def _level_from_indent(line: str) -> int:
    """Count leading indent markers; anything else ends the indent."""
    level = 0
    for ch in line:
        if ch != INDENT_MARKER:
            break
        level += 1
    return level

def _emit(tokens: List[Dict], v: str, lvl: int):
    tokens.append({"type": "LINE", "value": v, "nesting": lvl})

# ------------------------------ Main tokenizer -------------------------------

def tokenize(text: str) -> List[Dict]:
    tokens: List[Dict] = []
    # split on "\n" only: a trailing newline yields a final empty line, which
    # the tree builder ignores
    for raw in (text or "").split("\n"):
        lvl = _level_from_indent(raw)
        _emit(tokens, RE_MARKERS.sub("", raw), lvl)
    return tokens


def iter_lines(tokens: List[Dict]) -> Iterator[Tuple[int, str]]:
    """Yield (depth, content) pairs from LINE tokens."""
    for tok in tokens:
        if tok.get("type") != "LINE":
            continue
        yield int(tok.get("nesting", 0)), tok.get("value", "")
