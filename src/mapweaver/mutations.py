"""Copy-on-write structural edits.

Every operation deep-copies the tree and returns the new root. The tree passed in is never
touched, so a failed edit leaves the caller's state exactly as it was.
"""

from __future__ import annotations

from mapweaver.errors import CannotDeleteRoot
from mapweaver.logging import get_logger
from mapweaver.models.outline import MapNode
from mapweaver.tree import coerce_title, iter_nodes, require_node
from mapweaver.utils.ids import fresh_node_id

logger = get_logger(__name__)

NEW_NODE_TITLE = "New Node"


def fresh_id(root: MapNode) -> str:
    """Return an id that does not collide with any id already in `root`."""

    taken: set[str] = set()
    for node, _, _ in iter_nodes(root):
        taken.add(node.id)
    return fresh_node_id(taken, visited=len(taken))


def add_child(root: MapNode, parent_id: str, title: str = NEW_NODE_TITLE) -> MapNode:
    """Append a new leaf to `parent_id`'s children.

    Raises:
        NodeNotFound: If `parent_id` is not in the tree.
    """

    new_root = root.model_copy(deep=True)
    parent = require_node(new_root, parent_id)
    child = MapNode(id=fresh_id(new_root), title=coerce_title(title), children=[])
    parent.children.append(child)
    logger.debug("Added node %s under %s", child.id, parent_id)
    return new_root


def rename_node(root: MapNode, node_id: str, title: str) -> MapNode:
    """Replace only the title of `node_id`.

    A title that is blank after trimming falls back to `Untitled`.

    Raises:
        NodeNotFound: If `node_id` is not in the tree.
    """

    new_root = root.model_copy(deep=True)
    node = require_node(new_root, node_id)
    node.title = coerce_title(title)
    return new_root


def delete_node(root: MapNode, node_id: str) -> MapNode:
    """Remove `node_id` and its whole subtree.

    Raises:
        CannotDeleteRoot: If `node_id` is the root.
        NodeNotFound: If `node_id` is not in the tree.
    """

    if node_id == root.id:
        raise CannotDeleteRoot(node_id)
    require_node(root, node_id)

    def prune(node: MapNode) -> MapNode:
        return MapNode(
            id=node.id,
            title=node.title,
            children=[prune(c) for c in node.children if c.id != node_id],
        )

    new_root = prune(root)
    logger.debug("Deleted node %s", node_id)
    return new_root
