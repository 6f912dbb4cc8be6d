# indents/schema.py
# JSON Schema for the mapping view of a parsed tree.

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "indent-tree.schema.json"

SchemaValidationError = jsonschema.ValidationError

_SCHEMA: Dict[str, Any] | None = None


def load_schema() -> Dict[str, Any]:
    global _SCHEMA
    if _SCHEMA is None:
        # BOM-safe read
        _SCHEMA = json.loads(SCHEMA_PATH.read_text(encoding="utf-8-sig"))
    return _SCHEMA


def _plain(tree: Any) -> Any:
    to_dict = getattr(tree, "to_dict", None)
    return to_dict() if callable(to_dict) else tree


def validate_tree(tree: Any) -> None:
    """Raise SchemaValidationError if ``tree`` is not a well-formed mapping view."""
    jsonschema.validate(instance=_plain(tree), schema=load_schema(), cls=Draft202012Validator)


def tree_errors(tree: Any) -> List[str]:
    """All schema violations as readable strings (empty when valid)."""
    validator = Draft202012Validator(load_schema())
    out: List[str] = []
    for err in sorted(validator.iter_errors(_plain(tree)), key=lambda e: [str(p) for p in e.path]):
        where = "/".join(str(p) for p in err.path) or "<root>"
        out.append(f"{where}: {err.message}")
    return out
