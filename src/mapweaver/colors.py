"""Branch color assignment.

Only the root's direct children are stored in a `ColorMap`. Every other node resolves its color
through its depth-1 ancestor at layout time, so edits below depth 1 never change the map and
never reshuffle sibling branch colors.
"""

from __future__ import annotations

from collections.abc import Sequence

from mapweaver.models.outline import MapNode

ColorMap = dict[str, str]

PALETTES: tuple[tuple[str, ...], ...] = (
    # Vivid
    ("#6366f1", "#f59e0b", "#10b981", "#ef4444", "#0ea5e9", "#a855f7", "#f97316", "#14b8a6"),
    # Pastel
    ("#a5b4fc", "#fcd34d", "#6ee7b7", "#fca5a5", "#7dd3fc", "#d8b4fe", "#fdba74", "#5eead4"),
    # Ocean
    ("#0c4a6e", "#0369a1", "#0284c7", "#0891b2", "#0e7490", "#155e75"),
    # Earth
    ("#78350f", "#a16207", "#4d7c0f", "#15803d", "#9a3412", "#57534e"),
    # Mono
    ("#1f2937", "#374151", "#4b5563", "#6b7280"),
)

ROOT_COLOR = "#64748b"

_OPACITY_STEP = 0.15
_MIN_OPACITY = 0.35


def palette_for(index: int) -> tuple[str, ...]:
    """Select a built-in palette; indices wrap around."""

    return PALETTES[index % len(PALETTES)]


def assign_colors(root: MapNode, palette: Sequence[str]) -> ColorMap:
    """Map each depth-1 node id to `palette[i % len(palette)]`.

    Raises:
        ValueError: If the palette is empty.
    """

    if not palette:
        raise ValueError("palette must contain at least one color")
    return {child.id: palette[i % len(palette)] for i, child in enumerate(root.children)}


def depth_opacity(depth: int) -> float:
    """Tint factor for a node: full at depth 0 and 1, fading with each further level."""

    if depth <= 1:
        return 1.0
    return max(_MIN_OPACITY, round(1.0 - _OPACITY_STEP * (depth - 1), 4))


def resolve_color(
    depth: int,
    branch_id: str | None,
    color_map: ColorMap,
    root_color: str = ROOT_COLOR,
) -> tuple[str, float]:
    """Return `(color, opacity)` for a node.

    The root is always drawn in the neutral `root_color`. A branch missing from the map (e.g. a
    stale color map) also falls back to the neutral tone.
    """

    if depth == 0 or branch_id is None:
        return root_color, 1.0
    return color_map.get(branch_id, root_color), depth_opacity(depth)
