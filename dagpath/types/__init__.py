"""Type aliases and graph protocols."""

from dagpath.types.base import (
    Beforer,
    DynamicGraph,
    Graph,
    GraphWithHistory,
    Length,
)

__all__ = ["Beforer", "DynamicGraph", "Graph", "GraphWithHistory", "Length"]
