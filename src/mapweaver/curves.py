"""Edge curve descriptors.

Control points are pushed along the primary axis by a fixed fraction of the endpoints' distance
on that axis: short edges stay nearly straight, long ones bow visibly.
"""

from __future__ import annotations

from mapweaver.layout.modes import Axis, LayoutMode
from mapweaver.models.diagram import CurveDescriptor, Diagram, Point

DEFAULT_CURVATURE = 0.5


def build_curve(
    source: tuple[float, float],
    target: tuple[float, float],
    axis: Axis = "horizontal",
    curvature: float = DEFAULT_CURVATURE,
) -> CurveDescriptor:
    """Cubic curve from `source` to `target`, a pure function of its arguments."""

    sx, sy = source
    tx, ty = target
    if axis == "vertical":
        offset = (ty - sy) * curvature
        c1 = Point(x=sx, y=sy + offset)
        c2 = Point(x=tx, y=ty - offset)
    else:
        offset = (tx - sx) * curvature
        c1 = Point(x=sx + offset, y=sy)
        c2 = Point(x=tx - offset, y=ty)
    return CurveDescriptor(source=Point(x=sx, y=sy), control1=c1, control2=c2, target=Point(x=tx, y=ty))


def build_curves(diagram: Diagram, curvature: float = DEFAULT_CURVATURE) -> Diagram:
    """Return a copy of `diagram` with a curve attached to every edge."""

    axis = LayoutMode(diagram.mode).primary_axis
    positions = {n.id: (n.x, n.y) for n in diagram.nodes}
    edges = [
        e.model_copy(
            update={"curve": build_curve(positions[e.source_id], positions[e.target_id], axis, curvature)}
        )
        for e in diagram.edges
    ]
    return diagram.model_copy(update={"edges": edges})
