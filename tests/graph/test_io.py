import pytest

from airpath.exceptions import GraphFormatError
from airpath.graph.flight_graph import FlightGraph
from airpath.graph.io import edgelist_to_graph, load_flights


def test_edgelist_to_graph_basic(triangle_lines):
    g = edgelist_to_graph(triangle_lines)
    assert isinstance(g, FlightGraph)
    assert g.vertices() == ["A", "B", "C"]
    assert g.edge_cost("A", "C") == 5


def test_edgelist_to_graph_surcharge(triangle_lines):
    g = edgelist_to_graph(triangle_lines, surcharge=3)
    assert g.edge_cost("A", "B") == 7
    assert g.edge_cost("A", "C") == 11


def test_whitespace_comments_and_blank_lines():
    lines = [
        "# from to fare",
        "",
        "  ORD\tJFK    120  ",
        "   ",
        "JFK BOS 80\r\n",
    ]
    g = edgelist_to_graph(lines)
    assert g.number_of_edges() == 2
    assert g.edge_cost("BOS", "JFK") == 80


def test_extend_existing_graph(triangle_lines):
    g = FlightGraph(surcharge=1)
    result = edgelist_to_graph(["C D 2"], graph=g, surcharge=99)
    assert result is g
    edgelist_to_graph(triangle_lines, graph=g)
    assert g.edge_cost("C", "D") == 4
    assert g.number_of_nodes() == 4


@pytest.mark.parametrize(
    "lines, match",
    [
        (["A B 1", "A B"], "Line 2: expected 3 tokens"),
        (["A B 1 2"], "Line 1: expected 3 tokens"),
        (["A B x"], "Line 1: fare 'x' is not an integer"),
        (["A B 1", "", "A C 1.5"], "Line 3: fare '1.5' is not an integer"),
        (["A B -4"], "Line 1: negative cost -4"),
    ],
)
def test_malformed_lines(lines, match):
    with pytest.raises(GraphFormatError, match=match):
        edgelist_to_graph(lines)


def test_load_flights_from_file(write_flights, triangle_lines):
    path = write_flights(triangle_lines)
    g = load_flights(path, surcharge=2)
    assert g.surcharge == 2
    assert g.edge_cost("B", "C") == 5

    # str paths are accepted too
    assert load_flights(str(path)).edge_cost("B", "C") == 1


def test_load_flights_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_flights(tmp_path / "missing.txt")
