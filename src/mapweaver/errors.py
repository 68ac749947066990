"""Error taxonomy for tree normalization and editing."""

from __future__ import annotations


class MapWeaverError(ValueError):
    """Base class for all mapweaver errors."""


class InvalidTree(MapWeaverError):
    """Input is not a single-rooted, acyclic tree with unique ids."""


class NodeNotFound(MapWeaverError):
    """An edit referenced an id that is not in the current tree."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"node not found: {node_id!r}")
        self.node_id = node_id


class CannotDeleteRoot(MapWeaverError):
    """The root node can never be deleted; a map always has exactly one root."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"cannot delete root node {node_id!r}")
        self.node_id = node_id
