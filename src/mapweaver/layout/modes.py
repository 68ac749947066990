"""Layout mode selector."""

from __future__ import annotations

from enum import Enum
from typing import Literal

Axis = Literal["horizontal", "vertical"]


class LayoutMode(str, Enum):
    """The diagram layouts the engine can produce."""

    LOGICAL_RIGHT = "logical-right"
    LOGICAL_LEFT = "logical-left"
    RADIAL = "radial"
    ORG_CHART = "org-chart"
    CATALOG = "catalog"
    TIMELINE_HORIZONTAL = "timeline-horizontal"
    TIMELINE_VERTICAL = "timeline-vertical"
    FISHBONE = "fishbone"

    @property
    def primary_axis(self) -> Axis:
        """Axis along which the hierarchy grows; edge curves bow along it."""

        if self in (LayoutMode.ORG_CHART, LayoutMode.TIMELINE_VERTICAL):
            return "vertical"
        return "horizontal"

    @property
    def max_depth(self) -> int | None:
        """Deepest level the mode can draw, or None when unlimited."""

        if self is LayoutMode.CATALOG:
            return 2
        return None
