"""Helpers shared by the integer-indexed engines."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from dagpath.config import SEARCH_CONFIG, SearchConfig


def resolve_config(config: Optional[SearchConfig]) -> SearchConfig:
    """Return ``config``, or the global default when it is None."""
    return SEARCH_CONFIG if config is None else config


def resolve_index_path(
    from_: Sequence[int], via: Sequence[Any], n: int
) -> List[Any]:
    """Follow backpointers from ``n`` to ``0`` and return the edges in order.

    Args:
        from_: Predecessor index per vertex.
        via: Edge used to enter each vertex from its predecessor.
        n: Reached target index.

    Returns:
        Edges from vertex 0 to ``n``.
    """
    steps = 0
    v = n
    while v != 0:
        steps += 1
        v = from_[v]

    path: List[Any] = [None] * steps
    v = n
    while v != 0:
        steps -= 1
        path[steps] = via[v]
        v = from_[v]
    return path
