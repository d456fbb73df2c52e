"""Sample flight graphs shared by the algorithm tests."""

import pytest

from airpath.graph.flight_graph import FlightGraph


@pytest.fixture
def triangle1():
    # Fares (surcharge 0):
    #      [1]       [1]
    #  A◄───────►B◄───────►C
    #  ▲                   ▲
    #  └─────────[5]───────┘
    g = FlightGraph(surcharge=0)
    g.add_flight("A", "B", 1)
    g.add_flight("B", "C", 1)
    g.add_flight("A", "C", 5)
    return g


@pytest.fixture
def triangle1_isolated():
    # triangle1 plus an airport D without flights
    g = FlightGraph(surcharge=0)
    g.add_flight("A", "B", 1)
    g.add_flight("B", "C", 1)
    g.add_flight("A", "C", 5)
    g.add_airport("D")
    return g


@pytest.fixture
def triangle1_surcharge3():
    # triangle1 with every leg raised by 2 * 3:
    #      [7]       [7]
    #  A◄───────►B◄───────►C
    #  ▲                   ▲
    #  └────────[11]───────┘
    g = FlightGraph(surcharge=3)
    g.add_flight("A", "B", 1)
    g.add_flight("B", "C", 1)
    g.add_flight("A", "C", 5)
    return g


@pytest.fixture
def square1():
    # Fares:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   A                   C──────[4]──────E
    #   │                   │
    #   └────────►D─────────┘
    #       [2]        [2]
    #
    # F─[1]─G is a separate component.
    g = FlightGraph(surcharge=0)
    g.add_flight("A", "B", 1)
    g.add_flight("B", "C", 1)
    g.add_flight("A", "D", 2)
    g.add_flight("D", "C", 2)
    g.add_flight("C", "E", 4)
    g.add_flight("F", "G", 1)
    return g


@pytest.fixture
def long_line():
    # N0 - N1 - ... - N4999, every leg costs 1
    g = FlightGraph(surcharge=0)
    for i in range(4999):
        g.add_flight(f"N{i}", f"N{i + 1}", 1)
    return g
