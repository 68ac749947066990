"""Edit commands sent by the rendering surface."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class EditKind(str, Enum):
    """Structural edits a user can make on the map."""

    ADD_CHILD = "add_child"
    RENAME = "rename"
    DELETE = "delete"


class EditCommand(BaseModel):
    """A single edit request.

    `node_id` is the parent for `add_child` and the target for `rename` / `delete`.
    """

    kind: EditKind
    node_id: str
    title: str | None = None
    ts: datetime = Field(default_factory=lambda: datetime.now(UTC))
