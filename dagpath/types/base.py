"""Type aliases and graph protocols consumed by the shortest-path engines.

The engines never inspect how a graph is stored. A caller object only needs
the methods of one of the protocols below; conformance is structural, so no
subclassing is required.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import List, Protocol, TypeVar, Union

#: Numeric path length. Any type with ``+`` and ``<`` works; these are the
#: types exercised by the test-suite.
Length = Union[int, float, Fraction, Decimal]

EdgeT = TypeVar("EdgeT")
HistoryT = TypeVar("HistoryT")
VertexT = TypeVar("VertexT", bound="Beforer")


class Beforer(Protocol):
    """Vertex type with a strict weak ordering.

    Two vertices are equal for the search when neither is before the other.
    """

    def before(self, other: "Beforer", /) -> bool: ...


class Graph(Protocol[EdgeT]):
    """DAG over the integer vertices ``0..n``, ordered by magnitude."""

    def append_edges(self, edges: List[EdgeT], v: int, /) -> List[EdgeT]:
        """Append the outgoing edges of ``v`` and return the list.

        Every edge must lead to a vertex index strictly greater than ``v``.
        """
        ...

    def length(self, v: int, e: EdgeT, /) -> Length:
        """Return the length of edge ``e`` leaving ``v``."""
        ...

    def to(self, v: int, e: EdgeT, /) -> int:
        """Return the endpoint of edge ``e`` leaving ``v``."""
        ...


class DynamicGraph(Protocol[VertexT, EdgeT]):
    """DAG over lazily discovered vertices ordered by ``before``."""

    def append_edges(self, edges: List[EdgeT], v: VertexT, /) -> List[EdgeT]:
        """Append the outgoing edges of ``v`` and return the list.

        Every edge must lead to a vertex ``w`` with ``v.before(w)``.
        """
        ...

    def length(self, v: VertexT, e: EdgeT, /) -> Length: ...

    def to(self, v: VertexT, e: EdgeT, /) -> VertexT: ...


class GraphWithHistory(Protocol[EdgeT, HistoryT]):
    """Integer-indexed DAG whose edge lengths depend on the path taken."""

    def append_edges(self, edges: List[EdgeT], v: int, /) -> List[EdgeT]: ...

    def length(self, v: int, history: HistoryT, e: EdgeT, /) -> Length:
        """Return the length of ``e`` leaving ``v`` on a path with ``history``."""
        ...

    def to(self, v: int, e: EdgeT, /) -> int: ...

    def update_history(self, history: HistoryT, v: int, e: EdgeT, /) -> HistoryT:
        """Return the history after following ``e`` from ``v``."""
        ...
