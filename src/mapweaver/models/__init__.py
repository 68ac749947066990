"""Pydantic models used across the project."""

from __future__ import annotations

from mapweaver.models.diagram import CurveDescriptor, Diagram, Edge, Point, PositionedNode
from mapweaver.models.edits import EditCommand, EditKind
from mapweaver.models.outline import MapNode, OutlineNode

__all__ = [
    "CurveDescriptor",
    "Diagram",
    "Edge",
    "EditCommand",
    "EditKind",
    "MapNode",
    "OutlineNode",
    "Point",
    "PositionedNode",
]
