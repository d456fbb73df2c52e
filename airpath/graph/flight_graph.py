"""Undirected flight network with surcharge-inclusive edge costs.

`FlightGraph` extends `networkx.Graph` with strict edge insertion and the
``vertices()`` / ``adjacencies()`` queries consumed by the shortest-path
driver. Every stored edge cost already includes the airport surcharge, so the
driver treats costs as plain additive weights.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional, Tuple

import networkx as nx

from airpath.algorithms.types import NodeID
from airpath.config import ROUTE_CONFIG, RouteConfig
from airpath.exceptions import GraphFormatError


class FlightGraph(nx.Graph):
    """Undirected graph of airports connected by priced flights.

    This class enforces:
      - No automatic creation of missing airports in ``add_edge``.
      - Non-negative integer costs on every edge.
      - At most one edge per airport pair; re-adding a pair keeps the cheaper
        cost.

    Attributes:
        route_config: Surcharge settings applied by ``add_flight``.
    """

    def __init__(
        self,
        *args,
        surcharge: Optional[int] = None,
        config: Optional[RouteConfig] = None,
        **kwargs,
    ) -> None:
        """Initialize a FlightGraph.

        Args:
            *args: Positional arguments forwarded to ``networkx.Graph``.
            surcharge: Per-airport surcharge; overrides ``config``.
            config: Route configuration (default: ``ROUTE_CONFIG``).
            **kwargs: Keyword arguments forwarded to ``networkx.Graph``.
        """
        super().__init__(*args, **kwargs)
        route_config = config if config is not None else ROUTE_CONFIG
        if surcharge is not None:
            if surcharge < 0:
                raise GraphFormatError(f"Airport surcharge must be non-negative, got {surcharge}")
            route_config = replace(route_config, airport_surcharge=surcharge)
        self.route_config: RouteConfig = route_config

    @property
    def surcharge(self) -> int:
        return self.route_config.airport_surcharge

    #
    # Construction
    #
    def add_airport(self, name: NodeID) -> bool:
        """Add an airport if it is not present yet.

        Returns:
            True if the airport was added, False if it already existed.
        """
        if name in self:
            return False
        super().add_node(name)
        return True

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_of_edge: NodeID,
        v_of_edge: NodeID,
        cost: int,
        **attr: Any,
    ) -> None:
        """Add an undirected edge with a final traversal cost.

        Both airports must already exist. When the pair is already connected
        the edge is only updated if ``cost`` is cheaper.

        Raises:
            ValueError: If either airport does not exist.
            GraphFormatError: If ``cost`` is not a non-negative integer.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source airport '{u_of_edge}' does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target airport '{v_of_edge}' does not exist.")
        _check_cost(cost, f"edge ({u_of_edge}, {v_of_edge})")

        if self.has_edge(u_of_edge, v_of_edge):
            if cost >= self._adj[u_of_edge][v_of_edge]["cost"]:
                return
        super().add_edge(u_of_edge, v_of_edge, cost=cost, **attr)

    def add_flight(self, src: NodeID, dst: NodeID, fare: int) -> int:
        """Add a flight, creating airports as needed and applying surcharges.

        The stored cost is ``fare + surcharge_legs * surcharge``: the traveller
        pays the surcharge once for the departure airport and once for the
        arrival airport.

        Returns:
            The cost now stored for the airport pair (the cheaper one if the
            pair was already connected).
        """
        _check_cost(fare, f"flight {src} -> {dst}")
        self.add_airport(src)
        self.add_airport(dst)
        self.add_edge(src, dst, self.route_config.edge_cost(fare), fare=fare)
        return self._adj[src][dst]["cost"]

    #
    # Queries used by the shortest-path driver
    #
    def vertices(self) -> List[NodeID]:
        """Return airports in insertion order."""
        return list(self._node)

    def adjacencies(self, node: NodeID) -> List[Tuple[NodeID, int]]:
        """Return ``(neighbor, cost)`` pairs for every edge at ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        if node not in self._adj:
            raise KeyError(f"Airport '{node}' is not in the graph.")
        return [(neighbor, attr["cost"]) for neighbor, attr in self._adj[node].items()]

    def edge_cost(self, u: NodeID, v: NodeID) -> int:
        """Return the stored cost between two airports.

        Raises:
            KeyError: If the airports are not directly connected.
        """
        try:
            return self._adj[u][v]["cost"]
        except KeyError:
            raise KeyError(f"No flight between '{u}' and '{v}'.") from None


def _check_cost(value: Any, where: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"non-integer cost {value!r} on {where}")
    if value < 0:
        raise GraphFormatError(f"negative cost {value} on {where}")
