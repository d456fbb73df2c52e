"""Shortest-path-first (SPF) over a Fibonacci heap.

Implements label-setting Dijkstra. Every vertex is placed on the frontier up
front, keyed by infinity except the source at zero; improvements are pushed
through ``decrease_key`` on the vertex's heap handle instead of inserting
duplicate entries. Settled vertices are tracked in a `BitSet` by dense index.

Notes:
    The traversal always runs until the frontier is empty. Vertices that are
    never reached are still extracted (with an infinite key) and keep
    ``cost is None``.
"""

from __future__ import annotations

import math
from typing import Dict, List

from airpath.algorithms.types import NodeID, NodeRecord, PathResult, WeightedGraph
from airpath.exceptions import AlgorithmError
from airpath.logging import get_logger
from airpath.structures.bitset import BitSet
from airpath.structures.fibheap import FibonacciHeap

logger = get_logger(__name__)


def spf(graph: WeightedGraph, src_node: NodeID) -> Dict[NodeID, NodeRecord]:
    """Compute minimal costs from ``src_node`` to every vertex.

    Args:
        graph: Graph exposing ``vertices()`` and ``adjacencies(node)``.
        src_node: Source vertex.

    Returns:
        Mapping of vertex to its `NodeRecord`. ``cost`` is the minimal cost
        (None if unreachable) and ``prev`` links back towards the source.

    Raises:
        KeyError: If ``src_node`` is not in the graph.
        ValueError: If a negative edge weight is encountered.
        AlgorithmError: If a vertex is settled twice.
    """
    records: Dict[NodeID, NodeRecord] = {}
    for index, node in enumerate(graph.vertices()):
        records[node] = NodeRecord(node=node, index=index)
    if src_node not in records:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")
    records[src_node].cost = 0

    frontier: FibonacciHeap[NodeRecord] = FibonacciHeap()
    for record in records.values():
        key = record.cost if record.cost is not None else math.inf
        record.handle = frontier.insert(record, key)

    settled = BitSet(len(records) - 1)
    relaxations = 0

    while frontier:
        current = frontier.extract_min()
        current.handle = None
        if not settled.add(current.index):
            raise AlgorithmError(f"Node '{current.node}' was settled twice.")

        # Everything left on the frontier is unreachable as well
        if current.cost is None:
            continue

        for neighbor, weight in graph.adjacencies(current.node):
            if weight < 0:
                raise ValueError(
                    f"Negative weight {weight} on edge ({current.node}, {neighbor})"
                )
            target = records[neighbor]
            if settled.contains(target.index):
                continue
            new_cost = current.cost + weight
            if target.cost is None or new_cost < target.cost:
                target.cost = new_cost
                target.prev = current
                frontier.decrease_key(target.handle, new_cost)  # type: ignore[arg-type]
                relaxations += 1

    reachable = sum(1 for record in records.values() if record.reached)
    logger.debug(
        f"SPF from '{src_node}': {len(records)} nodes settled, "
        f"{reachable} reachable, {relaxations} relaxations"
    )
    return records


def resolve_path(records: Dict[NodeID, NodeRecord], dst_node: NodeID) -> List[NodeID]:
    """Return the node sequence from the source to ``dst_node``.

    Walks ``prev`` links iteratively, so arbitrarily long paths are fine.

    Returns:
        Nodes from source to destination, or an empty list if the destination
        is unreachable.

    Raises:
        KeyError: If ``dst_node`` has no record.
    """
    if dst_node not in records:
        raise KeyError(f"Destination node '{dst_node}' is not in the graph.")

    record = records[dst_node]
    if record.cost is None:
        return []

    path: List[NodeID] = []
    current = record
    while current is not None:
        path.append(current.node)
        current = current.prev
    path.reverse()
    return path


def shortest_path(graph: WeightedGraph, src_node: NodeID, dst_node: NodeID) -> PathResult:
    """Find the minimum-cost route between two vertices.

    Args:
        graph: Graph exposing ``vertices()`` and ``adjacencies(node)``.
        src_node: Source vertex.
        dst_node: Destination vertex.

    Returns:
        `PathResult` with ``cost`` None and an empty ``path`` when the
        destination cannot be reached.

    Raises:
        KeyError: If either vertex is not in the graph.
    """
    records = spf(graph, src_node)
    path = resolve_path(records, dst_node)
    result = PathResult(
        source=src_node,
        destination=dst_node,
        cost=records[dst_node].cost,
        path=tuple(path),
    )
    if result.reachable:
        logger.debug(f"Route {src_node} -> {dst_node}: cost {result.cost}, {len(path) - 1} hops")
    else:
        logger.debug(f"Route {src_node} -> {dst_node}: unreachable")
    return result
