"""Types and data structures for the shortest-path driver.

Defines the graph capability the driver consumes, the per-node traversal
record, and the immutable route result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Optional, Protocol, Tuple

from airpath.structures.fibheap import HeapHandle

NodeID = Hashable
Cost = int


class WeightedGraph(Protocol):
    """Read-only graph queries required by `spf`.

    Weights are non-negative and already include any per-traversal surcharge.
    """

    def vertices(self) -> Iterable[NodeID]: ...

    def adjacencies(self, node: NodeID) -> Iterable[Tuple[NodeID, Cost]]: ...


@dataclass(slots=True, eq=False)
class NodeRecord:
    """Traversal state of one node.

    Attributes:
        node: Node identifier in the graph.
        index: Dense 0-based index, used as the node's settled-set element.
        cost: Best known cost from the source; None until first reached.
        prev: Record of the predecessor on the best known path.
        handle: Heap handle while the node is on the frontier.
    """

    node: NodeID
    index: int
    cost: Optional[Cost] = None
    prev: Optional[NodeRecord] = field(default=None, repr=False)
    handle: Optional[HeapHandle] = field(default=None, repr=False)

    @property
    def reached(self) -> bool:
        return self.cost is not None


@dataclass(frozen=True)
class PathResult:
    """Minimum-cost route between two nodes.

    Attributes:
        source: Source node.
        destination: Destination node.
        cost: Total route cost, or None if the destination is unreachable.
        path: Nodes from source to destination; empty if unreachable.
    """

    source: NodeID
    destination: NodeID
    cost: Optional[Cost]
    path: Tuple[NodeID, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.cost is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "cost": self.cost,
            "path": list(self.path),
            "reachable": self.reachable,
        }
