"""Layered tree layouts: logical tree (both directions) and organization chart.

Leaves take consecutive slots along the breadth axis and every parent is centered over the span
of its children, so sibling subtrees never overlap. The depth axis is `depth * depth_spacing`.
"""

from __future__ import annotations

from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, place
from mapweaver.models.outline import MapNode


def breadth_slots(root: MapNode) -> dict[str, float]:
    """Assign each node a slot (in sibling-spacing units) along the breadth axis."""

    slots: dict[str, float] = {}
    next_leaf = 0

    def visit(node: MapNode) -> float:
        nonlocal next_leaf
        if not node.children:
            slot = float(next_leaf)
            next_leaf += 1
        else:
            child_slots = [visit(c) for c in node.children]
            slot = (child_slots[0] + child_slots[-1]) / 2
        slots[node.id] = slot
        return slot

    visit(root)
    return slots


def _layered(root: MapNode, spacing: LayoutSpacing, *, vertical: bool, mirror: bool) -> Placed:
    slots = breadth_slots(root)
    out = Placed()

    def walk(node: MapNode, depth: int, parent_id: str | None) -> None:
        breadth = slots[node.id] * spacing.sibling_spacing
        along = depth * spacing.depth_spacing
        if mirror:
            along = -along
        if vertical:
            out.placements.append(place(node, breadth, along, depth, parent_id))
        else:
            out.placements.append(place(node, along, breadth, depth, parent_id))
        for child in node.children:
            walk(child, depth + 1, node.id)

    walk(root, 0, None)
    return out


def logical_right(root: MapNode, spacing: LayoutSpacing) -> Placed:
    return _layered(root, spacing, vertical=False, mirror=False)


def logical_left(root: MapNode, spacing: LayoutSpacing) -> Placed:
    """Mirror of `logical_right`: branches grow leftwards from the root."""

    return _layered(root, spacing, vertical=False, mirror=True)


def org_chart(root: MapNode, spacing: LayoutSpacing) -> Placed:
    """Siblings spread horizontally, depth grows downward."""

    return _layered(root, spacing, vertical=True, mirror=False)
