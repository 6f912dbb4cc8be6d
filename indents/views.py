# indents/views.py
# Output views over a built tree.
#   TO_MAPPING -> plain dict / list structure (JSON-serializable)
#   TO_OBJECT  -> TreeObject: the same data with attribute access

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Iterator

TO_OBJECT  = "object"
TO_MAPPING = "mapping"

MODES = (TO_OBJECT, TO_MAPPING)


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown output mode: {mode!r} (expected one of {', '.join(MODES)})")
    return mode


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return TreeObject(value)
    if isinstance(value, list):
        return [_wrap(v) for v in value]
    return value


class TreeObject(Mapping):
    """
    Read-only object view over a mapping-shaped tree.

    Keys are reachable both as items (``t["a"]``, required for numeric keys)
    and as attributes (``t.a``). Branch dicts found below are wrapped on
    access; leaves are returned as-is.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Dict[Any, Any]):
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: Any) -> Any:
        return _wrap(self._data[key])

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("TreeObject is read-only")

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, TreeObject):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TreeObject({self._data!r})"

    def to_dict(self) -> Dict[Any, Any]:
        return self._data


def as_view(tree: Dict[Any, Any], mode: str = TO_OBJECT) -> Any:
    check_mode(mode)
    if mode == TO_MAPPING:
        return tree
    return TreeObject(tree)
