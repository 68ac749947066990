"""Shared types for the per-mode placement algorithms."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from mapweaver.config import LayoutSpacing
from mapweaver.models.outline import MapNode


@dataclass(frozen=True)
class Placement:
    """Raw, un-normalized position of one node."""

    id: str
    title: str
    x: float
    y: float
    depth: int
    parent_id: str | None = None


@dataclass
class Placed:
    """Output of a placement algorithm, in pre-order."""

    placements: list[Placement] = field(default_factory=list)
    omitted: list[str] = field(default_factory=list)


Placer = Callable[[MapNode, LayoutSpacing], Placed]


def place(node: MapNode, x: float, y: float, depth: int, parent_id: str | None) -> Placement:
    return Placement(id=node.id, title=node.title, x=x, y=y, depth=depth, parent_id=parent_id)


def descendants(node: MapNode) -> list[tuple[MapNode, int, str]]:
    """Pre-order `(node, depth_below, parent_id)` for everything under `node`, itself excluded."""

    out: list[tuple[MapNode, int, str]] = []
    stack = [(c, 1, node.id) for c in reversed(node.children)]
    while stack:
        current, level, parent_id = stack.pop()
        out.append((current, level, parent_id))
        stack.extend((c, level + 1, current.id) for c in reversed(current.children))
    return out
