"""One-call pipeline: normalize, assign colors, lay out, build edge curves."""

from __future__ import annotations

import time
from collections.abc import Sequence

from mapweaver.colors import assign_colors, palette_for
from mapweaver.config import Settings
from mapweaver.curves import build_curves
from mapweaver.layout import LayoutMode, layout
from mapweaver.logging import get_logger, map_context
from mapweaver.models.diagram import Diagram
from mapweaver.tree import RawNode, normalize

logger = get_logger(__name__)


def resolve_palette(palette: Sequence[str] | int) -> Sequence[str]:
    """Accept a palette index or an explicit list of colors."""

    if isinstance(palette, int):
        return palette_for(palette)
    return palette


def render(
    raw: RawNode,
    mode: LayoutMode | str,
    palette: Sequence[str] | int = 0,
    *,
    settings: Settings | None = None,
) -> Diagram:
    """Run the full pipeline on raw or normalized input.

    Raises:
        InvalidTree: If `raw` is not a tree.
        ValueError: If `mode` is unknown or the palette is empty.
    """

    settings = settings or Settings()
    mode = LayoutMode(mode)
    # Pre-built trees are validated too; normalize keeps their ids as they are.
    tree = normalize(raw)

    with map_context(map_id=tree.id, mode=mode.value):
        started = time.perf_counter()
        colors = assign_colors(tree, resolve_palette(palette))
        diagram = layout(tree, mode, colors, spacing=settings.spacing, root_color=settings.root_color)
        diagram = build_curves(diagram, curvature=settings.spacing.curvature)
        logger.debug("Rendered diagram in %.2fms", (time.perf_counter() - started) * 1000)
    return diagram
