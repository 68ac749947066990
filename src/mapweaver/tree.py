"""Tree normalization and read-only traversal.

`normalize` is the only way raw host input becomes a `MapNode` tree. It assigns ids to nodes that
lack one and keeps every explicit id untouched, which is what lets a tree rebuilt from edits keep
the identity of all unedited nodes.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from mapweaver.errors import InvalidTree, NodeNotFound
from mapweaver.logging import get_logger
from mapweaver.models.outline import MapNode, OutlineNode
from mapweaver.utils.ids import format_node_id, node_id_counter

logger = get_logger(__name__)

DEFAULT_TITLE = "Untitled"

RawNode = OutlineNode | MapNode | Mapping[str, Any]


def coerce_title(value: Any) -> str:
    """Return a usable title; blank or missing titles become `Untitled`."""

    if value is None:
        return DEFAULT_TITLE
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else DEFAULT_TITLE


def _field(node: Any, name: str) -> Any:
    if isinstance(node, BaseModel):
        return getattr(node, name, None)
    if isinstance(node, Mapping):
        return node.get(name)
    raise InvalidTree(f"outline node must be a mapping, got {type(node).__name__}")


def _children(node: Any) -> list[Any]:
    children = _field(node, "children")
    if children is None:
        return []
    if not isinstance(children, (list, tuple)):
        raise InvalidTree(f"children must be a list, got {type(children).__name__}")
    return list(children)


def _explicit_id(node: Any) -> str | None:
    value = _field(node, "id")
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def unwrap_root(raw: Any) -> Any:
    """Accept either a node or the stored `{"root": {...}}` envelope."""

    if isinstance(raw, Mapping) and "root" in raw and "title" not in raw:
        root = raw["root"]
        if root is None:
            raise InvalidTree("structure has no root node")
        return root
    return raw


def _scan(root: Any) -> set[str]:
    """Validate tree shape and collect explicit ids.

    Every input object may be visited once; seeing it again means a cycle or a shared subtree,
    both of which make the input something other than a tree.
    """

    seen_objects: set[int] = set()
    explicit: set[str] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen_objects:
            raise InvalidTree("outline node visited twice (cycle or shared subtree)")
        seen_objects.add(id(node))

        node_id = _explicit_id(node)
        if node_id is not None:
            if node_id in explicit:
                raise InvalidTree(f"duplicate node id: {node_id!r}")
            explicit.add(node_id)
        stack.extend(reversed(_children(node)))
    return explicit


def normalize(raw: RawNode) -> MapNode:
    """Turn host input into a normalized tree.

    Args:
        raw: Root node as an `OutlineNode`, `MapNode`, plain mapping, or `{"root": ...}` envelope.

    Returns:
        A new `MapNode` tree; the input is not modified.

    Raises:
        InvalidTree: If the input is cyclic, shares subtrees, repeats an id, or is malformed.
    """

    root = unwrap_root(raw)
    explicit = _scan(root)
    counter = node_id_counter()
    assigned = 0

    def next_id() -> str:
        nonlocal assigned
        while True:
            candidate = format_node_id(next(counter))
            if candidate not in explicit:
                assigned += 1
                return candidate

    def build(node: Any) -> MapNode:
        node_id = _explicit_id(node) or next_id()
        title = coerce_title(_field(node, "title"))
        return MapNode(id=node_id, title=title, children=[build(c) for c in _children(node)])

    tree = build(root)
    logger.debug("Normalized tree %s: %d explicit ids, %d assigned", tree.id, len(explicit), assigned)
    return tree


def iter_nodes(root: MapNode) -> Iterator[tuple[MapNode, int, str | None]]:
    """Yield `(node, depth, parent_id)` in pre-order."""

    stack: list[tuple[MapNode, int, str | None]] = [(root, 0, None)]
    while stack:
        node, depth, parent_id = stack.pop()
        yield node, depth, parent_id
        for child in reversed(node.children):
            stack.append((child, depth + 1, node.id))


def find_node(root: MapNode, node_id: str) -> MapNode | None:
    for node, _, _ in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def require_node(root: MapNode, node_id: str) -> MapNode:
    """Like `find_node` but raises `NodeNotFound`."""

    node = find_node(root, node_id)
    if node is None:
        raise NodeNotFound(node_id)
    return node


def parent_index(root: MapNode) -> dict[str, str | None]:
    """Map every node id to its parent id (root maps to None)."""

    return {node.id: parent_id for node, _, parent_id in iter_nodes(root)}


def node_ids(root: MapNode) -> set[str]:
    return {node.id for node, _, _ in iter_nodes(root)}


def count_nodes(root: MapNode) -> int:
    return sum(1 for _ in iter_nodes(root))


def subtree_size(node: MapNode) -> int:
    """Number of nodes in the subtree rooted at `node`, itself included."""

    return count_nodes(node)


def depth_one_ids(root: MapNode) -> tuple[str, ...]:
    """Ids of the root's direct children, in order."""

    return tuple(child.id for child in root.children)
