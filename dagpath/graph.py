"""Adjacency-list DAGs over the integer vertices ``0..n``.

`IndexedDigraph` stores outgoing `Arc` objects per vertex and satisfies the
`Graph` protocol. `HistoryDigraph` adds a ``history_length`` callback and
satisfies `GraphWithHistory`, using the arcs taken so far as the history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Optional, Tuple

from dagpath.types.base import Length


@dataclass(frozen=True)
class Arc:
    """A directed edge of an `IndexedDigraph`.

    Attributes:
        src: Source vertex index.
        dst: Destination vertex index.
        length: Edge length.
        key: Caller identifier; defaults to the insertion number.
    """

    src: int
    dst: int
    length: Length
    key: Hashable = None


#: History of a path in a `HistoryDigraph`: the arcs taken so far.
ArcHistory = Tuple[Arc, ...]


@dataclass
class IndexedDigraph:
    """A multi-digraph with integer vertices where every arc leads forward."""

    _out: Dict[int, List[Arc]] = field(default_factory=dict, init=False, repr=False)
    _next_key: int = field(default=0, init=False, repr=False)

    def add_edge(
        self, src: int, dst: int, length: Length = 1, key: Hashable = None
    ) -> Arc:
        """Add an arc from ``src`` to ``dst`` and return it.

        Args:
            src: Source vertex index.
            dst: Destination vertex index.
            length: Arc length.
            key: Optional identifier; an increasing integer when omitted.

        Returns:
            The new arc.

        Raises:
            ValueError: If ``src`` is negative or ``dst`` is not strictly
                greater than ``src``.
        """
        if src < 0:
            raise ValueError(f"Vertex index {src} is negative.")
        if dst <= src:
            raise ValueError(f"Arc {src} -> {dst} does not lead forward.")
        if key is None:
            key = self._next_key
            self._next_key += 1
        arc = Arc(src, dst, length, key)
        self._out.setdefault(src, []).append(arc)
        return arc

    def out_arcs(self, v: int) -> List[Arc]:
        """Return a copy of the arcs leaving ``v``."""
        return list(self._out.get(v, ()))

    def append_edges(self, edges: List[Arc], v: int) -> List[Arc]:
        edges.extend(self._out.get(v, ()))
        return edges

    def length(self, v: int, e: Arc) -> Length:
        return e.length

    def to(self, v: int, e: Arc) -> int:
        return e.dst


@dataclass
class HistoryDigraph(IndexedDigraph):
    """An `IndexedDigraph` whose arc lengths depend on the arcs taken before.

    Attributes:
        history_length: ``(arc, history) -> length`` callback. ``history`` is
            the tuple of arcs on the best path to the arc's source.
    """

    history_length: Callable[[Arc, ArcHistory], Length] = lambda arc, history: arc.length

    def length(  # type: ignore[override]
        self, v: int, history: Optional[ArcHistory], e: Arc
    ) -> Length:
        return self.history_length(e, history or ())

    def update_history(
        self, history: Optional[ArcHistory], v: int, e: Arc
    ) -> ArcHistory:
        return (history or ()) + (e,)
