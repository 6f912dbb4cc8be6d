# indents/normalizer.py
# Deterministic text normalizer for indented documents.
# - Line endings: "\r\n" and lone "\r" -> "\n"
# - Indent unit: every run of four spaces -> one tab marker
# - Comments: " Rem ..." / " % ..." stripped to end of line

from __future__ import annotations
import re

# Indents
INDENT_UNIT   = "    "  # 4 spaces
INDENT_MARKER = "\t"

# A comment starts at "Rem" or "%" (one optional space before it) and needs
# at least one character after the marker.
COMMENT_RE = re.compile(r'[ ]?(Rem|%)(.+)$', re.MULTILINE)

RE_LINE_BREAK = re.compile(r'\r\n?')


def normalize_newlines(text: str) -> str:
    return RE_LINE_BREAK.sub("\n", text or "")


def strip_comments(text: str) -> str:
    return COMMENT_RE.sub("", text or "")


def normalize_text(text: str, *, indent_unit: str = INDENT_UNIT, comments: bool = True) -> str:
    """Prepare raw document text for tokenizing (indent markers, then comments)."""
    s = normalize_newlines(text)
    if indent_unit:
        s = s.replace(indent_unit, INDENT_MARKER)
    if comments:
        s = strip_comments(s)
    return s
