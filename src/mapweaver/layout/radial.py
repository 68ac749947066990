"""Radial mind-map layout by recursive angular subdivision.

The root owns the full circle. Each child receives a contiguous slice of its parent's span,
proportional to the number of nodes in its subtree, and sits at its slice's mid-angle on the ring
`depth * radius_step`. Heavier subtrees get more room and sibling slices never overlap.
"""

from __future__ import annotations

import math

from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, place
from mapweaver.models.outline import MapNode

FULL_TURN = 2 * math.pi


def subtree_sizes(root: MapNode) -> dict[str, int]:
    """`size(n) = 1 + sum(size(child))` for every node."""

    sizes: dict[str, int] = {}

    def visit(node: MapNode) -> int:
        size = 1 + sum(visit(c) for c in node.children)
        sizes[node.id] = size
        return size

    visit(root)
    return sizes


def radial_spans(root: MapNode) -> dict[str, tuple[float, float]]:
    """Angular span `(start, end)` in radians owned by every node."""

    sizes = subtree_sizes(root)
    spans: dict[str, tuple[float, float]] = {}

    def split(node: MapNode, start: float, end: float) -> None:
        spans[node.id] = (start, end)
        if not node.children:
            return
        width = end - start
        total = sum(sizes[c.id] for c in node.children)
        before = 0
        for i, child in enumerate(node.children):
            child_start = start + width * before / total
            before += sizes[child.id]
            child_end = end if i == len(node.children) - 1 else start + width * before / total
            split(child, child_start, child_end)

    split(root, 0.0, FULL_TURN)
    return spans


def radial(root: MapNode, spacing: LayoutSpacing) -> Placed:
    spans = radial_spans(root)
    out = Placed()

    def walk(node: MapNode, depth: int, parent_id: str | None) -> None:
        start, end = spans[node.id]
        mid = (start + end) / 2
        radius = depth * spacing.radius_step
        out.placements.append(place(node, math.cos(mid) * radius, math.sin(mid) * radius, depth, parent_id))
        for child in node.children:
            walk(child, depth + 1, node.id)

    walk(root, 0, None)
    return out
