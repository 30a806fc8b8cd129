"""Shortest paths whose edge lengths depend on the path taken so far.

Same forward sweep as :mod:`dagpath.algorithms.dag`, but every vertex also
carries the history of its current best path. Edge lengths are computed from
that history and relaxation derives the destination's history from it.
"""

from __future__ import annotations

from typing import Any, List, Optional

from dagpath.algorithms.common import resolve_config, resolve_index_path
from dagpath.config import SearchConfig
from dagpath.exceptions import ContractViolationError, NoPathError
from dagpath.logging import get_logger
from dagpath.types.base import GraphWithHistory, Length

logger = get_logger(__name__)


def shortest_path_hist(
    graph: GraphWithHistory[Any, Any],
    n: int,
    initial_history: Any = None,
    config: Optional[SearchConfig] = None,
) -> List[Any]:
    """Return the shortest path from vertex 0 to vertex ``n``.

    Only reached vertices are expanded, so lengths and histories are never
    derived from a vertex without a path.

    The result is optimal only with respect to the greedy choice of the best
    history at each vertex: a longer prefix whose history would make later
    edges cheaper is discarded.

    Args:
        graph: Graph implementing ``append_edges``, ``length(v, history, e)``,
            ``to`` and ``update_history``.
        n: Target vertex index.
        initial_history: History of the empty path at vertex 0.
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
    hist: List[Any] = [None] * (n + 1)
    reached[0] = True
    hist[0] = initial_history

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
            new_length = shortest[v] + graph.length(v, hist[v], e)
            if not reached[w] or new_length < shortest[w]:
                shortest[w] = new_length
                from_[w] = v
                via[w] = e
                hist[w] = graph.update_history(hist[v], v, e)
                reached[w] = True

    logger.debug(
        "shortest_path_hist n=%d: expanded %d vertices, skipped %d backward "
        "edges, reached=%s",
        n,
        expanded,
        skipped,
        reached[n],
    )
    if not reached[n]:
        raise NoPathError(n, f"vertex {n} is not reachable from 0")

    return resolve_index_path(from_, via, n)
