"""Flight data loading.

Flight files hold one flight per line as three whitespace-separated tokens::

    ORD JFK 120
    JFK BOS 80

Blank lines and lines starting with ``#`` are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from airpath.exceptions import GraphFormatError
from airpath.graph.flight_graph import FlightGraph
from airpath.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = ("src", "dst", "fare")


def edgelist_to_graph(
    lines: Iterable[str],
    surcharge: Optional[int] = None,
    graph: Optional[FlightGraph] = None,
) -> FlightGraph:
    """Build or update a FlightGraph from ``from to fare`` lines.

    Args:
        lines: Iterable of text lines, e.g. an open file.
        surcharge: Per-airport surcharge for a newly created graph. Ignored
            when ``graph`` is given.
        graph: Existing graph to extend; if None, a new graph is created.

    Returns:
        The updated (or newly created) FlightGraph.

    Raises:
        GraphFormatError: If a line does not have exactly three tokens or
            its fare is not a non-negative integer. The message names the
            1-based line number.
    """
    if graph is None:
        graph = FlightGraph(surcharge=surcharge)

    flights = 0
    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        if len(tokens) != len(_COLUMNS):
            raise GraphFormatError(
                f"Line {lineno}: expected {len(_COLUMNS)} tokens {list(_COLUMNS)}, "
                f"got {len(tokens)}: {line.rstrip()!r}"
            )

        src, dst, fare_token = tokens
        try:
            fare = int(fare_token)
        except ValueError:
            raise GraphFormatError(
                f"Line {lineno}: fare {fare_token!r} is not an integer"
            ) from None

        try:
            graph.add_flight(src, dst, fare)
        except GraphFormatError as exc:
            raise GraphFormatError(f"Line {lineno}: {exc}") from exc
        flights += 1

    logger.debug(
        f"Loaded {flights} flights between {graph.number_of_nodes()} airports "
        f"(surcharge={graph.surcharge})"
    )
    return graph


def load_flights(path: Union[str, Path], surcharge: Optional[int] = None) -> FlightGraph:
    """Read a flight file into a new FlightGraph.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If the file content is malformed.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        return edgelist_to_graph(fh, surcharge=surcharge)
