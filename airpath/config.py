"""Configuration classes for airpath components."""

from dataclasses import dataclass


@dataclass
class RouteConfig:
    """Defaults for flight graph construction and route rendering."""

    # Fixed cost charged by every airport a flight touches
    airport_surcharge: int = 0

    # Airports charged per flight leg: one on departure, one on arrival
    surcharge_legs: int = 2

    # Separator between airport names when printing a route
    path_separator: str = " --> "

    def edge_cost(self, fare: int) -> int:
        """Return the traversal cost of a flight leg including surcharges."""
        return fare + self.surcharge_legs * self.airport_surcharge


# Global configuration instance
ROUTE_CONFIG = RouteConfig()
