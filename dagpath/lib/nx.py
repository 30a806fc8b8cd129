"""NetworkX graph conversion utilities.

Converts a NetworkX DAG into an `IndexedDigraph` whose vertex indices follow a
topological order, so the integer-indexed engines can run on it.

Example:
    >>> import networkx as nx
    >>> from dagpath import shortest_path
    >>> from dagpath.lib.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=1)
    >>> G.add_edge("A", "C", cost=5)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> [arc.key for arc in shortest_path(graph, node_map.to_index["C"])]
    [('A', 'B'), ('B', 'C')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from dagpath.graph import IndexedDigraph
from dagpath.logging import get_logger
from dagpath.types.base import Length

logger = get_logger(__name__)

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    source: Optional[Hashable] = None,
    weight: str = "cost",
    default: Length = 1,
) -> Tuple[IndexedDigraph, NodeMap]:
    """Convert a NetworkX DAG into an `IndexedDigraph`.

    Nodes are numbered in topological order. When ``source`` is given it is
    numbered 0 and nodes that cannot be reached from it are dropped, so the
    engines search from ``source``.

    Each arc's key is the original edge: ``(u, v)`` for a DiGraph and
    ``(u, v, k)`` for a MultiDiGraph.

    Args:
        G: Directed NetworkX graph without cycles.
        source: Optional node to number 0.
        weight: Edge attribute holding the length.
        default: Length for edges without ``weight``.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If ``G`` is undirected.
        KeyError: If ``source`` is not in ``G``.
        networkx.NetworkXUnfeasible: If ``G`` contains a cycle.
    """
    if not G.is_directed():
        raise TypeError("from_networkx requires a directed graph.")

    if source is not None:
        if source not in G:
            raise KeyError(f"Source node '{source}' is not in the graph.")
        G = G.subgraph(nx.descendants(G, source) | {source})

    # Every other kept node descends from source, so source sorts first.
    names = list(nx.topological_sort(G))
    node_map = NodeMap.from_names(names)

    graph = IndexedDigraph()
    if G.is_multigraph():
        for u, v, k, length in G.edges(keys=True, data=weight, default=default):
            graph.add_edge(
                node_map.to_index[u], node_map.to_index[v], length, key=(u, v, k)
            )
    else:
        for u, v, length in G.edges(data=weight, default=default):
            graph.add_edge(
                node_map.to_index[u], node_map.to_index[v], length, key=(u, v)
            )

    logger.debug(
        "Converted NetworkX graph: %d nodes, %d edges", len(node_map), G.number_of_edges()
    )
    return graph, node_map
