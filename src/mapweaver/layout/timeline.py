"""Timeline layouts.

Top-level children are events spaced along the primary axis, alternating sides of the axis by
index parity (even indices on the negative side). All descendants of an event are stacked in
pre-order on the same side as the event, further from the axis, indented by depth.
"""

from __future__ import annotations

from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, descendants, place
from mapweaver.models.outline import MapNode


def side(index: int) -> int:
    """-1 for even sibling indices, +1 for odd."""

    return -1 if index % 2 == 0 else 1


def _timeline(root: MapNode, spacing: LayoutSpacing, *, vertical: bool) -> Placed:
    out = Placed()

    def put(node: MapNode, along: float, across: float, depth: int, parent_id: str | None) -> None:
        if vertical:
            out.placements.append(place(node, across, along, depth, parent_id))
        else:
            out.placements.append(place(node, along, across, depth, parent_id))

    put(root, 0.0, 0.0, 0, None)
    for i, event in enumerate(root.children):
        sign = side(i)
        along = (i + 1) * spacing.event_spacing
        put(event, along, sign * spacing.event_offset, 1, root.id)
        for k, (node, level, parent_id) in enumerate(descendants(event)):
            put(
                node,
                along + (level - 1) * spacing.indent,
                sign * (spacing.detail_offset + k * spacing.row_spacing),
                level + 1,
                parent_id,
            )
    return out


def timeline_horizontal(root: MapNode, spacing: LayoutSpacing) -> Placed:
    return _timeline(root, spacing, vertical=False)


def timeline_vertical(root: MapNode, spacing: LayoutSpacing) -> Placed:
    return _timeline(root, spacing, vertical=True)
