"""Graph primitives and helpers.

This package provides the undirected `FlightGraph` type and loaders for
whitespace-delimited flight files (`io`).
"""

from airpath.graph.flight_graph import FlightGraph, NodeID
from airpath.graph.io import edgelist_to_graph, load_flights

__all__ = ["FlightGraph", "NodeID", "edgelist_to_graph", "load_flights"]
