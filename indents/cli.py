# indents/cli.py
# CLI for parsing indented documents; prints the tree as JSON and optional receipts.

from __future__ import annotations

import argparse
import datetime as _dt
import hashlib
import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from .normalizer import INDENT_UNIT, normalize_text
from .parser import ParseOptions, parse_document
from .schema import SchemaValidationError, validate_tree
from .tree_builder import IndentError
from .views import MODES, TO_MAPPING

logger = logging.getLogger(__name__)


def _now_utc_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z"


def _load_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _dump(obj: Any) -> str:
    # non-string keys (numbers) become JSON strings
    return json.dumps(obj, indent=2, ensure_ascii=False)


def _write_receipt(path: Optional[str], receipt: Dict[str, Any]) -> None:
    if not path:
        return
    Path(path).write_text(json.dumps(receipt, indent=2, sort_keys=True), encoding="utf-8")
    print(f"Wrote receipt: {path}")


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="indents",
        description="Parse an indented document into a tree; print it as JSON.",
    )
    p.add_argument("document", nargs="?", help="Path to the indented document.")
    p.add_argument("--mode", choices=MODES, default=TO_MAPPING, help="Output view (default: mapping).")
    p.add_argument("--indent-unit", type=int, default=len(INDENT_UNIT), metavar="N",
                   help="Spaces per indent level (default: 4).")
    p.add_argument("--no-comments", action="store_true", help="Keep 'Rem' / '%%' comment text.")
    p.add_argument("--validate", action="store_true", help="Check the tree against the bundled JSON Schema.")
    p.add_argument("--print-receipt", action="store_true")
    p.add_argument("--receipt-out", metavar="PATH", help="Write parse receipt to PATH (JSON).")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.document:
        p.error("document path required (e.g., examples/config.txt)")
    if args.indent_unit < 1:
        p.error("--indent-unit must be >= 1")

    path = Path(args.document)
    if not path.is_file():
        print(f"indents: document not found: {path}")
        return 2

    opts = ParseOptions(
        mode=args.mode,
        indent_unit=" " * args.indent_unit,
        strip_comments=not args.no_comments,
    )

    # Hash of the normalized text, so line-ending and indent-width noise don't change it
    text = _load_text(path)
    norm = normalize_text(text, indent_unit=opts.indent_unit, comments=opts.strip_comments)
    h = hashlib.sha256(norm.encode("utf-8")).hexdigest()
    receipt: Dict[str, Any] = {
        "engine": "indents",
        "source": {"path": str(path), "hash": f"sha256:{h}"},
        "run": {"timestamp": _now_utc_iso(), "uuid": str(uuid.uuid4())},
        "mode": opts.mode,
    }

    try:
        tree = parse_document(text, options=opts)
        if args.validate:
            validate_tree(tree)
    except IndentError as e:
        err = {**receipt, "status": "error", "reason": str(e), "token": e.token, "depth": e.depth}
        print(_dump(err))
        _write_receipt(args.receipt_out, err)
        return 1
    except SchemaValidationError as e:
        err = {**receipt, "status": "error", "reason": f"schema: {e.message}"}
        print(_dump(err))
        _write_receipt(args.receipt_out, err)
        return 1

    receipt["status"] = "ok"
    receipt["keys"] = [str(k) for k in tree]

    print(_dump(tree.to_dict() if hasattr(tree, "to_dict") else tree))
    if args.print_receipt:
        print(json.dumps(receipt, indent=2, sort_keys=True))
    _write_receipt(args.receipt_out, receipt)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
