"""Shortest paths over a lazily discovered, ordered vertex space.

Vertices are opaque values ordered by their ``before`` method. The open set
holds every discovered but unprocessed vertex, sorted by that order. Popping
the order-smallest vertex first keeps the sweep a valid forward DP even though
the graph is only known one vertex at a time.

The search stops at the first vertex that is not before ``end``. Once any such
vertex has been reached, open vertices whose length already matches or exceeds
the best completion are not expanded (branch and bound).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from dagpath.algorithms.common import resolve_config
from dagpath.config import SearchConfig
from dagpath.exceptions import ContractViolationError, NoPathError
from dagpath.logging import get_logger
from dagpath.types.base import DynamicGraph, Length

logger = get_logger(__name__)


@dataclass(eq=False, slots=True)
class _VertexRecord:
    """Relaxation state of one discovered vertex.

    ``from_`` points at the predecessor's record, so the records form a tree
    rooted at the start vertex.
    """

    vertex: Any
    shortest: Length = 0
    from_: Optional["_VertexRecord"] = None
    via: Any = None


def _search(open_set: List[_VertexRecord], w: Any) -> int:
    """Return the first index whose vertex is not before ``w``."""
    lo, hi = 0, len(open_set)
    while lo < hi:
        mid = (lo + hi) // 2
        if open_set[mid].vertex.before(w):
            lo = mid + 1
        else:
            hi = mid
    return lo


def _resolve_record_path(record: _VertexRecord) -> List[Any]:
    """Follow predecessor links back to the start and return the edges in order."""
    path: List[Any] = []
    while record.from_ is not None:
        path.append(record.via)
        record = record.from_
    path.reverse()
    return path


def shortest_path_dyn(
    graph: DynamicGraph[Any, Any],
    start: Any,
    end: Any,
    config: Optional[SearchConfig] = None,
) -> List[Any]:
    """Return the shortest path from ``start`` to any vertex not before ``end``.

    Args:
        graph: Graph implementing ``append_edges``, ``length`` and ``to``
            over vertices with a ``before`` method.
        start: Start vertex.
        end: Target bound; every vertex ``w`` with ``not w.before(end)``
            completes a path.
        config: Search configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        Edges of the path in order. Empty when ``start`` is not before ``end``.

    Raises:
        NoPathError: If ``end`` is before ``start``, or no vertex at or past
            ``end`` is reachable.
        ContractViolationError: In strict mode, for an edge to ``w`` with
            ``not v.before(w)``.

    Note:
        Pruning assumes non-negative lengths. An infinite graph in which
        ``end`` is unreachable never terminates.
    """
    if end.before(start):
        raise NoPathError(end, "end vertex is ordered before the start vertex")

    strict = resolve_config(config).strict

    open_set: List[_VertexRecord] = [_VertexRecord(start)]
    edges: List[Any] = []
    arrived = False
    best_length: Length = 0
    expanded = 0
    pruned = 0
    skipped = 0

    while open_set and open_set[0].vertex.before(end):
        current = open_set.pop(0)

        if arrived and current.shortest >= best_length:
            pruned += 1
            continue

        expanded += 1
        v = current.vertex
        edges.clear()
        edges = graph.append_edges(edges, v)
        for e in edges:
            w = graph.to(v, e)
            if strict and not v.before(w):
                raise ContractViolationError(v, w)
            if w.before(v):
                skipped += 1
                continue
            new_length = current.shortest + graph.length(v, e)

            if not w.before(end):
                if not arrived or new_length < best_length:
                    best_length = new_length
                arrived = True

            idx = _search(open_set, w)
            if idx == len(open_set) or w.before(open_set[idx].vertex):
                open_set.insert(idx, _VertexRecord(w, new_length, current, e))
            else:
                record = open_set[idx]
                if new_length < record.shortest:
                    record.shortest = new_length
                    record.from_ = current
                    record.via = e

    logger.debug(
        "shortest_path_dyn: expanded %d vertices, pruned %d, skipped %d "
        "backward edges, %d candidates left",
        expanded,
        pruned,
        skipped,
        len(open_set),
    )
    if not open_set:
        raise NoPathError(end, "no vertex at or past the end vertex is reachable")

    # Insertion order is not cost order; compare every surviving candidate.
    best = open_set[0]
    for record in open_set[1:]:
        if record.shortest < best.shortest:
            best = record

    return _resolve_record_path(best)
