# tests/conftest.py
# Ensure the project root (the folder that contains 'indents' and 'tests') is on
# sys.path so that `from indents...` imports work without an install.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


SAMPLE_DOC = """\
server
    host
        localhost
    port
        8080 % default port
    flags
        0x1F
        verbose
"""


@pytest.fixture
def sample_doc() -> str:
    return SAMPLE_DOC


@pytest.fixture
def sample_file(tmp_path: pathlib.Path) -> pathlib.Path:
    p = tmp_path / "server.txt"
    p.write_text(SAMPLE_DOC, encoding="utf-8")
    return p
