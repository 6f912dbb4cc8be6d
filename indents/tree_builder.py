# indents/tree_builder.py
# Builds a nested tree from (depth, content) line records.
#
# The tree lives in a flat arena: index 0 is the root branch, every other
# entry is a Leaf or a Branch whose children are arena indices. The cursor
# (`path`) is a list of branch indices, one per nesting level, so nothing
# holds a live reference into the structure being built.
#
# Legal depth for a line after the first: 1 <= depth <= len(path) + 1
#   depth <  len(path)  -> ascend (truncate path)
#   depth == len(path)  -> sibling
#   depth == len(path)+1 -> descend (last entry of the container becomes a branch)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple, Union

from .values import Value, elval

logger = logging.getLogger(__name__)

ROOT = 0

# ----------------------------
# Errors
# ----------------------------

class IndentError(ValueError):
    def __init__(self, message: str, token: Any = None, depth: Optional[int] = None):
        super().__init__(message)
        self.token = token
        self.depth = depth

# ----------------------------
# Nodes
# ----------------------------

@dataclass(frozen=True)
class Leaf:
    value: Value

@dataclass
class Branch:
    key: Optional[Value]                             # None for the root
    children: List[int] = field(default_factory=list)

Node = Union[Leaf, Branch]


def _is_ignored(content: Any) -> bool:
    # blank-line artifacts from normalization
    if not isinstance(content, str):
        return False
    return content == "" or content == "\n" or content[0] == "\0"


def find_branch(arena: List[Node], container: Branch, key: Value) -> Optional[int]:
    """Index of the branch keyed ``key`` directly under ``container``, if any.

    Keys compare by value, so ``1`` and ``1.0`` name the same branch.
    """
    for idx in container.children:
        node = arena[idx]
        if isinstance(node, Branch) and node.key == key:
            return idx
    return None


def promote(container: Branch, branch_index: int) -> Branch:
    """
    Return a copy of ``container`` whose last entry is replaced by ``branch_index``.

    When ``branch_index`` is already one of the container's children the last
    entry is just dropped, so the existing branch keeps its position.
    """
    head = list(container.children[:-1])
    if branch_index not in head:
        head.append(branch_index)
    return Branch(key=container.key, children=head)


class IndentTreeBuilder:
    """
    Incremental tree builder. One instance per document.

    >>> b = IndentTreeBuilder()
    >>> for depth, text in [(0, "a"), (1, "b"), (1, "c"), (2, "d")]:
    ...     b.accept_line(depth, text)
    >>> b.to_dict()
    {'a': ['b', {'c': ['d']}]}
    """

    def __init__(self) -> None:
        self.arena: List[Node] = [Branch(key=None)]
        self.path: Optional[List[int]] = None

    # --- state -------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self.path is not None

    @property
    def depth(self) -> int:
        return len(self.path or [])

    def current_keys(self) -> List[Value]:
        """Keys along the active path, outermost first."""
        return [self.arena[i].key for i in (self.path or [])]

    # --- building ----------------------------------------------------------

    def _add(self, node: Node) -> int:
        self.arena.append(node)
        return len(self.arena) - 1

    def _descend(self, container_index: int, token: Value, depth: int) -> int:
        container = self.arena[container_index]
        if not container.children:
            raise IndentError(
                f"Unexpected indent near `{token}`. Nothing to nest under at depth {depth}.",
                token, depth,
            )

        last = self.arena[container.children[-1]]
        target = find_branch(self.arena, container, last.value)
        if target is None:
            target = self._add(Branch(key=last.value))
        else:
            logger.debug("reusing branch %r under %r", last.value, container.key)

        self.arena[container_index] = promote(container, target)
        logger.debug("promoted %r to a branch at depth %d", last.value, depth)
        return target

    def accept_line(self, depth: int, content: Any) -> None:
        if _is_ignored(content):
            return

        value = elval(content)

        if self.path is None:
            if depth != 0:
                raise IndentError(
                    f"Invalid indentation depth near `{value}` ({depth} indents)",
                    value, depth,
                )
            target = self._add(Branch(key=value))
            self.arena[ROOT].children.append(target)
            self.path = [target]
            return

        path_size = len(self.path)
        if depth - 1 > path_size or depth < 1:
            raise IndentError(
                f"Unexpected indent near `{value}`. Was the indentation too deep ({depth})?",
                value, depth,
            )

        if depth < path_size:
            logger.debug("ascend %d -> %d at %r", path_size, depth, value)
            self.path = self.path[:depth]
        elif depth > path_size:
            self.path.append(self._descend(self.path[-1], value, depth))

        parent = self.arena[self.path[-1]]
        parent.children.append(self._add(Leaf(value)))

    def accept_lines(self, lines: Iterable[Tuple[int, Any]]) -> "IndentTreeBuilder":
        for depth, content in lines:
            self.accept_line(depth, content)
        return self

    # --- result ------------------------------------------------------------

    def _materialize(self, index: int) -> Any:
        # iterative, so nesting depth is not bound by the recursion limit
        node = self.arena[index]
        if isinstance(node, Leaf):
            return node.value
        items: list = []
        out = {node.key: items}
        stack = [(node, items)]
        while stack:
            branch, items = stack.pop()
            for i in branch.children:
                child = self.arena[i]
                if isinstance(child, Leaf):
                    items.append(child.value)
                    continue
                sub: list = []
                items.append({child.key: sub})
                stack.append((child, sub))
        return out

    def to_dict(self) -> dict:
        """Plain nested structure: root mapping, list containers, one-key dicts for branches."""
        out: dict = {}
        for idx in self.arena[ROOT].children:
            out.update(self._materialize(idx))
        return out


def build_tree(lines: Iterable[Tuple[int, Any]]) -> dict:
    return IndentTreeBuilder().accept_lines(lines).to_dict()
