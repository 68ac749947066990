"""Derived diagram geometry."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class Point(BaseModel):
    x: float
    y: float


class PositionedNode(BaseModel):
    """A tree node annotated with its computed position and branch metadata."""

    id: str
    title: str
    x: float
    y: float
    depth: int = Field(ge=0)
    parent_id: str | None = None
    branch_id: str | None = None

    color: str = ""
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


class CurveDescriptor(BaseModel):
    """Cubic Bezier curve from source to target."""

    source: Point
    control1: Point
    control2: Point
    target: Point

    @computed_field  # type: ignore[prop-decorator]
    @property
    def path(self) -> str:
        """SVG path data for the curve."""

        return (
            f"M {self.source.x:g} {self.source.y:g} "
            f"C {self.control1.x:g} {self.control1.y:g}, "
            f"{self.control2.x:g} {self.control2.y:g}, "
            f"{self.target.x:g} {self.target.y:g}"
        )


class Edge(BaseModel):
    """Directed parent -> child connection."""

    id: str
    source_id: str
    target_id: str
    color: str = ""
    curve: CurveDescriptor | None = None


class Diagram(BaseModel):
    """Layout output for one tree, mode and color map."""

    mode: str
    nodes: list[PositionedNode] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    # Ids a depth-limited mode left out, in pre-order.
    omitted: list[str] = Field(default_factory=list)

    def unpack(self) -> tuple[list[PositionedNode], list[Edge]]:
        return self.nodes, self.edges

    def node(self, node_id: str) -> PositionedNode:
        """Return the positioned node with the given id.

        Raises:
            KeyError: If the node is not part of this diagram.
        """

        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(node_id)
