# pylint: disable=protected-access,invalid-name
from decimal import Decimal
from fractions import Fraction

import networkx as nx
import pytest

from dagpath.algorithms.dag import shortest_path
from dagpath.config import SearchConfig
from dagpath.exceptions import ContractViolationError, NoPathError
from dagpath.graph import IndexedDigraph


class LinearGraph:
    """Vertex v has a single edge, numbered v + 1, to v + 1."""

    def append_edges(self, ee, v):
        ee.append(v + 1)
        return ee

    def to(self, v, e):
        return e

    def length(self, v, e):
        return 1


class DoubleEdgesGraph:
    """Two parallel edges from v to v + 1; the True edge has length 1."""

    def append_edges(self, ee, v):
        if v >= 100:
            raise AssertionError("overshot")
        if v % 2 == 0:
            ee.extend([True, False])
        else:
            ee.extend([False, True])
        return ee

    def to(self, v, e):
        return v + 1

    def length(self, v, e):
        return 1 if e else 2


class RecordingGraph(IndexedDigraph):
    """IndexedDigraph that remembers which vertices were expanded."""

    def __init__(self):
        super().__init__()
        self.expanded = []

    def append_edges(self, edges, v):
        self.expanded.append(v)
        return super().append_edges(edges, v)


class BackwardEdgeGraph:
    """0 -> 1 -> 2 plus an edge from 1 back to 0."""

    def append_edges(self, ee, v):
        ee.extend({0: [(0, 1)], 1: [(1, 0), (1, 2)]}.get(v, []))
        return ee

    def to(self, v, e):
        return e[1]

    def length(self, v, e):
        return 1


def test_negative_target():
    with pytest.raises(NoPathError) as exc_info:
        shortest_path(LinearGraph(), -1)
    assert exc_info.value.target == -1


def test_zero_target():
    assert shortest_path(LinearGraph(), 0) == []


def test_linear():
    path = shortest_path(LinearGraph(), 100)
    assert len(path) == 100
    assert path == [i + 1 for i in range(100)]


def test_double_edges():
    path = shortest_path(DoubleEdgesGraph(), 100)
    assert len(path) == 100
    assert all(path)


def test_choose_cheaper_detour():
    g = IndexedDigraph()
    a = g.add_edge(0, 1, 1)
    b = g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)
    assert shortest_path(g, 2) == [a, b]


def test_unreachable_target():
    g = IndexedDigraph()
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 1)
    with pytest.raises(NoPathError):
        shortest_path(g, 3)


def test_unreached_vertices_not_expanded():
    g = RecordingGraph()
    g.add_edge(0, 2, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    shortest_path(g, 3)
    assert g.expanded == [0, 2]


def test_edges_past_target_ignored():
    g = IndexedDigraph()
    g.add_edge(0, 5, 1)
    g.add_edge(0, 1, 3)
    g.add_edge(1, 2, 3)
    path = shortest_path(g, 2)
    assert [(arc.src, arc.dst) for arc in path] == [(0, 1), (1, 2)]


def test_tie_keeps_first_predecessor():
    g = IndexedDigraph()
    first = g.add_edge(0, 2, 2)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    assert shortest_path(g, 2) == [first]


def test_tie_keeps_first_parallel_edge():
    g = IndexedDigraph()
    first = g.add_edge(0, 1, 1)
    g.add_edge(0, 1, 1)
    assert shortest_path(g, 1) == [first]


def test_negative_lengths():
    g = IndexedDigraph()
    g.add_edge(0, 1, 1)
    g.add_edge(1, 3, -4)
    direct = g.add_edge(0, 3, -2)
    path = shortest_path(g, 3)
    assert sum(arc.length for arc in path) == -3
    assert path != [direct]


def test_float_lengths():
    g = IndexedDigraph()
    g.add_edge(0, 1, 0.5)
    g.add_edge(1, 2, 0.25)
    g.add_edge(0, 2, 1.0)
    assert sum(arc.length for arc in shortest_path(g, 2)) == pytest.approx(0.75)


def test_backward_edge_skipped():
    assert shortest_path(BackwardEdgeGraph(), 2) == [(0, 1), (1, 2)]


def test_backward_edge_strict():
    with pytest.raises(ContractViolationError) as exc_info:
        shortest_path(BackwardEdgeGraph(), 2, config=SearchConfig(strict=True))
    assert exc_info.value.source == 1
    assert exc_info.value.target == 0


def test_edge_past_target_not_a_violation_in_strict_mode():
    g = IndexedDigraph()
    g.add_edge(0, 9, 1)
    arc = g.add_edge(0, 1, 1)
    assert shortest_path(g, 1, config=SearchConfig(strict=True)) == [arc]


def test_idempotent():
    g = IndexedDigraph()
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    assert shortest_path(g, 3) == shortest_path(g, 3)
    assert shortest_path(DoubleEdgesGraph(), 100) == shortest_path(
        DoubleEdgesGraph(), 100
    )


@pytest.mark.parametrize("seed", range(20))
def test_matches_networkx(random_dag, seed):
    g, gnx = random_dag(30, density=0.15, seed=seed, low=-5, high=20)
    for n in (1, 10, 29):
        try:
            expected = nx.bellman_ford_path_length(gnx, 0, n, weight="cost")
        except nx.NetworkXNoPath:
            with pytest.raises(NoPathError):
                shortest_path(g, n)
            continue
        path = shortest_path(g, n)
        assert sum(arc.length for arc in path) == expected
        assert path[0].src == 0
        assert path[-1].dst == n
        assert all(a.dst == b.src for a, b in zip(path, path[1:]))


@pytest.mark.parametrize("number", [Fraction, Decimal])
def test_exact_length_types(number):
    g = IndexedDigraph()
    a = g.add_edge(0, 1, number(1) / 3)
    b = g.add_edge(1, 2, number(1) / 3)
    g.add_edge(0, 2, number(1))
    path = shortest_path(g, 2)
    assert path == [a, b]
    assert sum(arc.length for arc in path) == 2 * (number(1) / 3)
