"""Editing session state for a single map.

A `MapSession` owns the current tree and swaps it for a new one on every successful edit. A
failed edit raises and leaves the session untouched. Diagrams are memoized per
`(version, mode, palette_index)`; the color map is memoized per `(depth-1 ids, palette_index)` so
edits below the top level reuse it as is.
"""

from __future__ import annotations

from mapweaver.colors import ColorMap, assign_colors, palette_for
from mapweaver.config import Settings
from mapweaver.curves import build_curves
from mapweaver.layout import LayoutMode, layout
from mapweaver.logging import get_logger, map_context
from mapweaver.models.diagram import Diagram
from mapweaver.models.edits import EditCommand, EditKind
from mapweaver.models.outline import MapNode
from mapweaver.mutations import NEW_NODE_TITLE, add_child, delete_node, rename_node
from mapweaver.tree import RawNode, depth_one_ids, normalize

logger = get_logger(__name__)


class MapSession:
    """Current tree plus display selection for one map."""

    def __init__(self, raw: RawNode, *, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._tree = normalize(raw)
        self.version = 1
        self.mode = LayoutMode(self.settings.default_mode)
        self.palette_index = self.settings.palette_index
        self.history: list[EditCommand] = []

        self._diagrams: dict[tuple[int, LayoutMode, int], Diagram] = {}
        self._colors_key: tuple[tuple[str, ...], int] | None = None
        self._colors: ColorMap = {}

    @property
    def tree(self) -> MapNode:
        return self._tree

    def set_mode(self, mode: LayoutMode | str) -> None:
        self.mode = LayoutMode(mode)

    def set_palette(self, index: int) -> None:
        if index < 0:
            raise ValueError("palette index must be >= 0")
        self.palette_index = index

    def apply(self, command: EditCommand) -> MapNode:
        """Apply one edit and return the new tree.

        Raises:
            NodeNotFound: If the command references an id not in the tree.
            CannotDeleteRoot: If the command deletes the root.
        """

        if command.kind is EditKind.ADD_CHILD:
            new_tree = add_child(self._tree, command.node_id, command.title or NEW_NODE_TITLE)
        elif command.kind is EditKind.RENAME:
            new_tree = rename_node(self._tree, command.node_id, command.title or "")
        else:
            new_tree = delete_node(self._tree, command.node_id)

        self._tree = new_tree
        self.version += 1
        self.history.append(command)
        logger.info("Applied %s on %s (version %d)", command.kind.value, command.node_id, self.version)
        return new_tree

    def add_child(self, parent_id: str, title: str = NEW_NODE_TITLE) -> MapNode:
        return self.apply(EditCommand(kind=EditKind.ADD_CHILD, node_id=parent_id, title=title))

    def rename(self, node_id: str, title: str) -> MapNode:
        return self.apply(EditCommand(kind=EditKind.RENAME, node_id=node_id, title=title))

    def delete(self, node_id: str) -> MapNode:
        return self.apply(EditCommand(kind=EditKind.DELETE, node_id=node_id))

    def color_map(self) -> ColorMap:
        """Branch colors, recomputed only when top-level ids or the palette change."""

        key = (depth_one_ids(self._tree), self.palette_index)
        if key != self._colors_key:
            self._colors = assign_colors(self._tree, palette_for(self.palette_index))
            self._colors_key = key
        return self._colors

    def diagram(self) -> Diagram:
        """Diagram for the current tree, mode and palette."""

        key = (self.version, self.mode, self.palette_index)
        cached = self._diagrams.get(key)
        if cached is not None:
            return cached

        with map_context(map_id=self._tree.id, mode=self.mode.value):
            diagram = layout(
                self._tree,
                self.mode,
                self.color_map(),
                spacing=self.settings.spacing,
                root_color=self.settings.root_color,
            )
            diagram = build_curves(diagram, curvature=self.settings.spacing.curvature)

        # Older versions can never be requested again.
        self._diagrams = {k: v for k, v in self._diagrams.items() if k[0] == self.version}
        self._diagrams[key] = diagram
        return diagram
