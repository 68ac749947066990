"""ID utilities."""

from __future__ import annotations

import itertools
import time
from typing import Iterator


def node_id_counter() -> Iterator[int]:
    """Return a counter for normalization ids.

    Returns:
        A counter that yields consecutive numbers starting from 0.
    """

    return itertools.count(0)


def format_node_id(n: int, prefix: str = "n_") -> str:
    """Format a numeric counter to a node id (e.g. `n_0`, `n_12`)."""

    return f"{prefix}{n}"


def fresh_node_id(taken: set[str], visited: int) -> str:
    """Return an id for a newly created node that is not in `taken`.

    Combines a nanosecond timestamp with the number of nodes visited so far, so two nodes added in
    the same tick still differ.
    """

    stamp = time.time_ns()
    candidate = f"node_{stamp}_{visited}"
    bump = itertools.count(1)
    while candidate in taken:
        candidate = f"node_{stamp}_{visited}_{next(bump)}"
    return candidate
