"""Layout engine: eight diagram layouts over the same normalized tree."""

from __future__ import annotations

from mapweaver.layout.engine import PLACERS, layout
from mapweaver.layout.modes import LayoutMode
from mapweaver.layout.radial import radial_spans

__all__ = ["PLACERS", "LayoutMode", "layout", "radial_spans"]
