"""airpath: cheapest routes through flight networks.

airpath computes single-source shortest paths with a Fibonacci heap frontier
and a bit-vector settled set over an undirected flight graph in which every
airport used adds a fixed surcharge.

Primary API:
    load_flights() - Read a ``from to cost`` flight file into a FlightGraph
    FlightGraph - Undirected flight network with surcharge-inclusive costs
    shortest_path() - Minimum-cost route between two airports
    spf() - Per-node traversal records from one source
    FibonacciHeap, BitSet - The underlying data structures

Example:
    from airpath import FlightGraph, shortest_path

    graph = FlightGraph(surcharge=0)
    graph.add_flight("A", "B", 1)
    graph.add_flight("B", "C", 1)
    graph.add_flight("A", "C", 5)

    result = shortest_path(graph, "A", "C")
    assert result.cost == 2 and result.path == ("A", "B", "C")
"""

from __future__ import annotations

from airpath import cli, logging
from airpath.algorithms.spf import resolve_path, shortest_path, spf
from airpath.algorithms.types import NodeRecord, PathResult
from airpath.config import ROUTE_CONFIG, RouteConfig
from airpath.exceptions import (
    AirpathError,
    AlgorithmError,
    EmptyHeapError,
    GraphFormatError,
    InvalidHandleError,
    InvalidKeyError,
)
from airpath.graph.flight_graph import FlightGraph
from airpath.graph.io import edgelist_to_graph, load_flights
from airpath.structures.bitset import BitSet
from airpath.structures.fibheap import FibonacciHeap, HeapHandle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "FlightGraph",
    "load_flights",
    "edgelist_to_graph",
    # Algorithms
    "spf",
    "shortest_path",
    "resolve_path",
    "NodeRecord",
    "PathResult",
    # Structures
    "BitSet",
    "FibonacciHeap",
    "HeapHandle",
    # Configuration
    "RouteConfig",
    "ROUTE_CONFIG",
    # Errors
    "AirpathError",
    "AlgorithmError",
    "EmptyHeapError",
    "GraphFormatError",
    "InvalidHandleError",
    "InvalidKeyError",
    # Utilities
    "cli",
    "logging",
]
