from __future__ import annotations
import json, sys
from pathlib import Path

# Ensure project root (which contains `indents/`) is on sys.path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

def canonical(obj) -> str:
    # json.dumps turns numeric keys into strings, same as the golden files
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))

def tree_for(path: Path):
    from indents.parser import parse_file
    from indents.views import TO_MAPPING
    return parse_file(path, TO_MAPPING)

def check_document(path: Path) -> int:
    golden_path = Path(str(path) + ".json")
    if not golden_path.exists():
        print(f"[ERROR] Missing golden: {golden_path}. Export via: python -m indents.cli {path}")
        return 1
    new_tree = tree_for(path)
    old_tree = json.loads(golden_path.read_text(encoding="utf-8"))
    if canonical(new_tree) == canonical(old_tree):
        print(f"[OK] {path.name} matches golden.")
        return 0
    print(f"[FAIL] Tree changed for {path.name}.")
    print(f"       Update golden: python -m indents.cli {path} > {golden_path}")
    return 2

def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    base = Path(args[0]) if args else ROOT / "samples"
    if not base.exists():
        print(f"[ERROR] {base} not found."); return 1
    rc = 0
    for p in sorted(base.glob("*.txt")):
        rc |= check_document(p)
    return 1 if rc else 0

if __name__ == "__main__":
    sys.exit(main())
