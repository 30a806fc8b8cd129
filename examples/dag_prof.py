# pylint: disable=protected-access,invalid-name
import random

from line_profiler import LineProfiler

from dagpath.algorithms.dynamic import shortest_path_dyn


class Index(int):
    def before(self, other):
        return self < other


class RandomJumpGraph:
    """Unbounded graph; every vertex has ten edges jumping 1..50 ahead."""

    def __init__(self, seed=0):
        self.seed = seed

    def append_edges(self, ee, v):
        rng = random.Random(self.seed * 1_000_003 + v)
        ee.extend((rng.randint(1, 50), rng.randint(1, 100)) for _ in range(10))
        return ee

    def to(self, v, e):
        return Index(v + e[0])

    def length(self, v, e):
        return e[1]


lp = LineProfiler()
lp_wrapper = lp(shortest_path_dyn)
lp_wrapper(RandomJumpGraph(), Index(0), Index(5000))
lp.print_stats()
