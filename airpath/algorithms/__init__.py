"""Shortest-path algorithms."""

from airpath.algorithms.spf import resolve_path, shortest_path, spf
from airpath.algorithms.types import NodeRecord, PathResult, WeightedGraph

__all__ = [
    "spf",
    "resolve_path",
    "shortest_path",
    "NodeRecord",
    "PathResult",
    "WeightedGraph",
]
