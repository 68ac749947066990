"""Fishbone (cause and effect) layout.

The root sits at the left end of a horizontal spine. Bones alternate above (even index) and below
(odd index) the spine, each further right than the last and, per side, further from the spine.
Everything under a bone steps diagonally away from the spine, on the bone's side.
"""

from __future__ import annotations

from mapweaver.config import LayoutSpacing
from mapweaver.layout.base import Placed, descendants, place
from mapweaver.layout.timeline import side
from mapweaver.models.outline import MapNode


def fishbone(root: MapNode, spacing: LayoutSpacing) -> Placed:
    out = Placed()
    out.placements.append(place(root, 0.0, 0.0, 0, None))

    for i, bone in enumerate(root.children):
        sign = side(i)
        bone_x = (i + 1) * spacing.bone_spacing
        bone_y = sign * (spacing.bone_offset + (i // 2) * spacing.bone_offset_step)
        out.placements.append(place(bone, bone_x, bone_y, 1, root.id))
        for k, (node, level, parent_id) in enumerate(descendants(bone)):
            out.placements.append(
                place(
                    node,
                    bone_x + (k + 1) * spacing.rib_dx,
                    bone_y + sign * (k + 1) * spacing.rib_dy,
                    level + 1,
                    parent_id,
                )
            )
    return out
