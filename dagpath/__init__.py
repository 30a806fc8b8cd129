"""dagpath: shortest paths in directed acyclic graphs.

Callers supply a graph by implementing a small traversal protocol
(``append_edges``, ``length``, ``to``); the engines return the edges of a
minimum-length path or raise ``NoPathError``.

Primary API:
    shortest_path() - vertices are the integers ``0..n``
    shortest_path_dyn() - vertices are ordered values discovered on the fly
    shortest_path_hist() - edge lengths depend on the path taken so far
    IndexedDigraph, HistoryDigraph - ready-made adjacency-list graphs

Example:
    from dagpath import IndexedDigraph, shortest_path

    g = IndexedDigraph()
    g.add_edge(0, 1, length=1)
    g.add_edge(1, 2, length=1)
    g.add_edge(0, 2, length=5)

    path = shortest_path(g, 2)  # [Arc(0, 1, ...), Arc(1, 2, ...)]
"""

from __future__ import annotations

from dagpath import logging
from dagpath._version import __version__
from dagpath.algorithms import shortest_path, shortest_path_dyn, shortest_path_hist
from dagpath.config import SEARCH_CONFIG, SearchConfig
from dagpath.exceptions import ContractViolationError, NoPathError
from dagpath.graph import Arc, HistoryDigraph, IndexedDigraph
from dagpath.types.base import Beforer, DynamicGraph, Graph, GraphWithHistory, Length

__all__ = [
    # Version
    "__version__",
    # Engines
    "shortest_path",
    "shortest_path_dyn",
    "shortest_path_hist",
    # Graphs
    "Arc",
    "IndexedDigraph",
    "HistoryDigraph",
    # Protocols and types
    "Beforer",
    "Graph",
    "DynamicGraph",
    "GraphWithHistory",
    "Length",
    # Errors
    "NoPathError",
    "ContractViolationError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
