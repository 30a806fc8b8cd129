"""Shortest-path engines for directed acyclic graphs."""

from dagpath.algorithms.dag import shortest_path
from dagpath.algorithms.dynamic import shortest_path_dyn
from dagpath.algorithms.history import shortest_path_hist

__all__ = ["shortest_path", "shortest_path_dyn", "shortest_path_hist"]
