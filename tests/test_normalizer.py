from textwrap import dedent

from indents import TO_MAPPING, parse_document
from indents.normalizer import normalize_newlines, normalize_text, strip_comments
from indents.tokenizer import iter_lines, tokenize


def test_line_endings_are_unified():
    assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"


def test_four_spaces_become_one_marker():
    assert normalize_text("a\n    b\n        c") == "a\n\tb\n\t\tc"


def test_custom_indent_unit():
    assert normalize_text("a\n  b\n    c", indent_unit="  ") == "a\n\tb\n\t\tc"


def test_comments_are_stripped_to_end_of_line():
    assert strip_comments("port % the port") == "port"
    assert strip_comments("name Rem the name") == "name"
    assert strip_comments("a\nb %x\nc") == "a\nb\nc"


def test_comment_marker_needs_following_text():
    assert strip_comments("50%") == "50%"


def test_comments_can_be_kept():
    assert normalize_text("a % note", comments=False) == "a % note"


def test_tokenize_counts_leading_markers():
    text = normalize_text(dedent("""\
    root
        child
            grandchild
        sibling
    """))
    toks = tokenize(text)
    assert toks[:4] == [
        {"type": "LINE", "value": "root", "nesting": 0},
        {"type": "LINE", "value": "child", "nesting": 1},
        {"type": "LINE", "value": "grandchild", "nesting": 2},
        {"type": "LINE", "value": "sibling", "nesting": 1},
    ]
    # trailing newline leaves one empty line behind
    assert toks[-1] == {"type": "LINE", "value": "", "nesting": 0}


def test_tokenize_drops_inner_and_trailing_markers():
    toks = tokenize("\ta\tb\t\t")
    assert toks == [{"type": "LINE", "value": "ab", "nesting": 1}]


def test_space_runs_inside_content_are_dropped():
    assert parse_document("r\n    a\tb\n", TO_MAPPING) == {"r": ["ab"]}
    assert parse_document("r\n    hello    world\n", TO_MAPPING) == {"r": ["helloworld"]}


def test_iter_lines_skips_foreign_tokens():
    toks = [
        {"type": "LINE", "value": "a", "nesting": 0},
        {"type": "OTHER", "value": "x", "nesting": 3},
        {"type": "LINE", "value": "b", "nesting": 1},
    ]
    assert list(iter_lines(toks)) == [(0, "a"), (1, "b")]
