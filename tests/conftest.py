"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import random
from typing import Callable, Tuple

import networkx as nx
import pytest

from dagpath.graph import IndexedDigraph
from dagpath.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Undo level changes made to the dagpath logger by a test."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = root_logger.level
    yield
    root_logger.setLevel(level)


RandomDag = Callable[..., Tuple[IndexedDigraph, nx.MultiDiGraph]]


@pytest.fixture
def random_dag() -> RandomDag:
    """Factory for random forward-only DAGs and their NetworkX twin.

    Vertices are ``0..num_nodes-1``; each ordered pair ``u < v`` gets between
    zero and two parallel arcs. The NetworkX graph stores lengths under
    ``cost`` and contains every vertex, even isolated ones.
    """

    def make(
        num_nodes: int,
        density: float = 0.3,
        seed: int = 0,
        low: int = 1,
        high: int = 10,
    ) -> Tuple[IndexedDigraph, nx.MultiDiGraph]:
        rng = random.Random(seed)
        g = IndexedDigraph()
        gnx = nx.MultiDiGraph()
        gnx.add_nodes_from(range(num_nodes))
        for u in range(num_nodes):
            for v in range(u + 1, num_nodes):
                for _ in range(2):
                    if rng.random() < density:
                        length = rng.randint(low, high)
                        g.add_edge(u, v, length)
                        gnx.add_edge(u, v, cost=length)
        return g, gnx

    return make
