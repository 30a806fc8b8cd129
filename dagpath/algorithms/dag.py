"""Shortest paths in DAGs over the integer vertices ``0..n``.

Vertex indices are already a topological order, so one forward sweep that
relaxes the edges of each reached vertex settles every distance.
"""

from __future__ import annotations

from typing import Any, List, Optional

from dagpath.algorithms.common import resolve_config, resolve_index_path
from dagpath.config import SearchConfig
from dagpath.exceptions import ContractViolationError, NoPathError
from dagpath.logging import get_logger
from dagpath.types.base import Graph, Length

logger = get_logger(__name__)


def shortest_path(
    graph: Graph[Any], n: int, config: Optional[SearchConfig] = None
) -> List[Any]:
    """Return the shortest path from vertex 0 to vertex ``n``.

    Edges leading to ``w <= v`` break the forward-only contract and are
    skipped (or rejected in strict mode). Edges leading past ``n`` are
    ignored. On equal lengths the first discovered predecessor is kept.

    Args:
        graph: Graph implementing ``append_edges``, ``length`` and ``to``.
        n: Target vertex index.
        config: Search configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        Edges of the path in order from 0 to ``n``. Empty when ``n == 0``.

    Raises:
        NoPathError: If ``n < 0`` or vertex ``n`` cannot be reached.
        ContractViolationError: In strict mode, for an edge to ``w <= v``.
    """
    if n == 0:
        return []
    if n < 0:
        raise NoPathError(n, f"target index {n} is negative")

    strict = resolve_config(config).strict

    shortest: List[Length] = [0] * (n + 1)
    reached = [False] * (n + 1)
    from_ = [0] * (n + 1)
    via: List[Any] = [None] * (n + 1)
    reached[0] = True

    edges: List[Any] = []
    expanded = 0
    skipped = 0
    for v in range(n):
        if not reached[v]:
            continue
        expanded += 1
        edges.clear()
        edges = graph.append_edges(edges, v)
        for e in edges:
            w = graph.to(v, e)
            if w <= v:
                if strict:
                    raise ContractViolationError(v, w)
                skipped += 1
                continue
            if w > n:
                continue
            new_length = shortest[v] + graph.length(v, e)
            if not reached[w] or new_length < shortest[w]:
                shortest[w] = new_length
                from_[w] = v
                via[w] = e
                reached[w] = True

    logger.debug(
        "shortest_path n=%d: expanded %d vertices, skipped %d backward edges, "
        "reached=%s",
        n,
        expanded,
        skipped,
        reached[n],
    )
    if not reached[n]:
        raise NoPathError(n, f"vertex {n} is not reachable from 0")

    return resolve_index_path(from_, via, n)
