"""Catalog layout: one column per top-level branch.

Only the root, its children (column heads) and grandchildren (column rows) are drawn. Anything
deeper is left out and reported in `Placed.omitted`.
"""

from __future__ import annotations

from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, descendants, place
from mapweaver.logging import get_logger
from mapweaver.models.outline import MapNode

logger = get_logger(__name__)


def catalog(root: MapNode, spacing: LayoutSpacing) -> Placed:
    out = Placed()
    out.placements.append(place(root, 0.0, 0.0, 0, None))

    for col, head in enumerate(root.children):
        x = col * spacing.column_width
        out.placements.append(place(head, x, spacing.row_spacing, 1, root.id))
        for row, item in enumerate(head.children):
            out.placements.append(place(item, x, spacing.row_spacing * (row + 2), 2, head.id))
            out.omitted.extend(n.id for n, _, _ in descendants(item))

    if out.omitted:
        logger.debug("Catalog layout omitted %d nodes deeper than depth 2", len(out.omitted))
    return out
