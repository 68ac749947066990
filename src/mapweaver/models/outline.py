"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineNode(BaseModel):
    """Editable outline node as supplied by the host.

    Ids are optional on input; normalization fills in the missing ones.
    """

    id: str | None = None
    title: str = ""
    children: list["OutlineNode"] = Field(default_factory=list)


class MapNode(BaseModel):
    """Normalized outline node.

    Every node carries a non-empty id that is unique within its tree and never reassigned to a
    different node. Child order is significant.
    """

    id: str = Field(min_length=1)
    title: str
    children: list["MapNode"] = Field(default_factory=list)
