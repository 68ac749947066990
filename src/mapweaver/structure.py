"""Loading generated map structures.

The generator stores maps as `{"root": {"title": ..., "children": [...]}}`. Generation output is
not always valid, so unparseable input degrades to an empty map titled after the map itself.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mapweaver.logging import get_logger
from mapweaver.models.outline import MapNode

logger = get_logger(__name__)

DEFAULT_MAP_TITLE = "Mind Map"


def empty_structure(title: str | None = None) -> dict[str, Any]:
    return {"root": {"title": title or DEFAULT_MAP_TITLE, "children": []}}


def parse_structure(raw: str | bytes | dict[str, Any] | None, fallback_title: str | None = None) -> dict[str, Any]:
    """Return the root node mapping from a stored structure.

    Args:
        raw: JSON text/bytes, an already decoded envelope, or a bare node object.
        fallback_title: Root title to use when `raw` holds no usable structure.

    Returns:
        The root node as a plain mapping, ready for `normalize`.
    """

    data: Any = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Structure is not valid UTF-8 JSON; using an empty map")
            data = None

    if isinstance(data, dict):
        root = data.get("root") if "root" in data and "title" not in data else data
        if isinstance(root, dict):
            return root

    logger.warning("Structure has no root node; using an empty map")
    return empty_structure(fallback_title)["root"]


def load_structure(path: Path, fallback_title: str | None = None) -> dict[str, Any]:
    """Read a structure file (UTF-8 JSON)."""

    return parse_structure(path.read_bytes(), fallback_title=fallback_title)


def dump_structure(root: MapNode) -> dict[str, Any]:
    """Envelope a normalized tree for the host to persist."""

    return {"root": root.model_dump(mode="json")}
