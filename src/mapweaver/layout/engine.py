"""Layout dispatch and the shared post-pass.

`layout` is a pure function of `(tree, mode, color map)`: the per-mode placer computes raw
coordinates, then every mode goes through the same normalization that translates the diagram so
its minimum x and y sit at the margin, and resolves branch ids, colors and edges.
"""

from __future__ import annotations

from mapweaver.colors import ROOT_COLOR, ColorMap, resolve_color
from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, Placer
from mapweaver.layout.catalog import catalog
from mapweaver.layout.fishbone import fishbone
from mapweaver.layout.layered import logical_left, logical_right, org_chart
from mapweaver.layout.modes import LayoutMode
from mapweaver.layout.radial import radial
from mapweaver.layout.timeline import timeline_horizontal, timeline_vertical
from mapweaver.logging import get_logger
from mapweaver.models.diagram import Diagram, Edge, PositionedNode
from mapweaver.models.outline import MapNode

logger = get_logger(__name__)

PLACERS: dict[LayoutMode, Placer] = {
    LayoutMode.LOGICAL_RIGHT: logical_right,
    LayoutMode.LOGICAL_LEFT: logical_left,
    LayoutMode.RADIAL: radial,
    LayoutMode.ORG_CHART: org_chart,
    LayoutMode.CATALOG: catalog,
    LayoutMode.TIMELINE_HORIZONTAL: timeline_horizontal,
    LayoutMode.TIMELINE_VERTICAL: timeline_vertical,
    LayoutMode.FISHBONE: fishbone,
}


def edge_id(target_id: str) -> str:
    """Edge ids follow their child node, so they survive unrelated edits."""

    return f"e_{target_id}"


def _finish(
    placed: Placed,
    mode: LayoutMode,
    color_map: ColorMap,
    spacing: LayoutSpacing,
    root_color: str,
) -> Diagram:
    placements = placed.placements
    dx = spacing.margin - min(p.x for p in placements)
    dy = spacing.margin - min(p.y for p in placements)

    branch_of: dict[str, str | None] = {}
    nodes: list[PositionedNode] = []
    edges: list[Edge] = []
    for p in placements:
        if p.depth == 0 or p.parent_id is None:
            branch = None
        elif p.depth == 1:
            branch = p.id
        else:
            branch = branch_of[p.parent_id]
        branch_of[p.id] = branch

        color, opacity = resolve_color(p.depth, branch, color_map, root_color)
        nodes.append(
            PositionedNode(
                id=p.id,
                title=p.title,
                x=p.x + dx,
                y=p.y + dy,
                depth=p.depth,
                parent_id=p.parent_id,
                branch_id=branch,
                color=color,
                opacity=opacity,
            )
        )
        if p.parent_id is not None:
            edges.append(Edge(id=edge_id(p.id), source_id=p.parent_id, target_id=p.id, color=color))

    return Diagram(mode=mode.value, nodes=nodes, edges=edges, omitted=list(placed.omitted))


def layout(
    root: MapNode,
    mode: LayoutMode | str,
    color_map: ColorMap,
    *,
    spacing: LayoutSpacing | None = None,
    root_color: str = ROOT_COLOR,
) -> Diagram:
    """Compute positioned nodes and edges for a normalized tree.

    Args:
        root: Normalized tree.
        mode: Layout mode or its string value.
        color_map: Depth-1 id -> palette color, from `assign_colors`.
        spacing: Geometry constants; defaults to `LayoutSpacing()`.
        root_color: Neutral color for the root node.

    Returns:
        Diagram: Nodes in pre-order plus one edge per drawn non-root node.

    Raises:
        ValueError: If `mode` is not a known layout mode.
    """

    mode = LayoutMode(mode)
    spacing = spacing or LayoutSpacing()
    placed = PLACERS[mode](root, spacing)
    diagram = _finish(placed, mode, color_map, spacing, root_color)
    logger.debug(
        "Laid out %d nodes, %d edges in %s mode (%d omitted)",
        len(diagram.nodes),
        len(diagram.edges),
        mode.value,
        len(diagram.omitted),
    )
    return diagram
