# indents/values.py
# Value typing for tokens read from an indented document.
# - Fully numeric text -> int (no fraction/exponent) or float
# - "0x" + hex digits  -> int
# - anything else      -> unchanged str
# Typing happens once, when a line is accepted; already-typed values pass through.

from __future__ import annotations
import re
from typing import Union

Value = Union[int, float, str]

# Leading/trailing whitespace is allowed around numbers ("  42 " -> 42).
RE_INT     = re.compile(r'^\s*[+-]?\d+\s*$')
RE_NUMERIC = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$')
RE_HEX     = re.compile(r'^0x([0-9A-Fa-f]+)$')


def is_numeric(token: str) -> bool:
    return bool(RE_NUMERIC.match(token or ""))


def elval(token) -> Value:
    """Return ``token`` as a number when it spells one, otherwise unchanged."""
    if not isinstance(token, str):
        return token

    if RE_INT.match(token):
        return int(token)
    if is_numeric(token):
        return float(token)

    m = RE_HEX.match(token)
    if m:
        return int(m.group(1), 16)

    return token
