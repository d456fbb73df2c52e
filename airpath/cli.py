"""Command-line interface for airpath."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Callable, List, Optional

from airpath.algorithms.spf import shortest_path
from airpath.algorithms.types import PathResult
from airpath.config import ROUTE_CONFIG
from airpath.exceptions import AirpathError, GraphFormatError
from airpath.graph.io import load_flights
from airpath.logging import get_logger, level_for, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def format_route(result: PathResult, separator: Optional[str] = None) -> str:
    """Render a route as the two-line console report.

    Example:
        Min cost from A to C is 2
        A --> B --> C
    """
    if not result.reachable:
        return f"No route from {result.source} to {result.destination}"
    sep = ROUTE_CONFIG.path_separator if separator is None else separator
    lines = [
        f"Min cost from {result.source} to {result.destination} is {result.cost}",
        sep.join(str(node) for node in result.path),
    ]
    return "\n".join(lines)


def _route(
    flights: Path,
    src: str,
    dst: str,
    surcharge: int,
    as_json: bool = False,
) -> None:
    """Load a flight file, solve one route and print it.

    Exits with status 1 on missing files, malformed data, unknown airports
    or any other airpath error.
    """
    logger.info(f"Loading flights from: {flights}")
    start = perf_counter()

    try:
        graph = load_flights(flights, surcharge=surcharge)
        logger.info(
            f"Loaded {graph.number_of_nodes()} airports and "
            f"{graph.number_of_edges()} routes"
        )
        result = shortest_path(graph, src, dst)
    except FileNotFoundError:
        logger.error(f"Flight data file not found: {flights}")
        print(f"ERROR: Flight data file not found: {flights}")
        sys.exit(1)
    except GraphFormatError as e:
        logger.error(f"Malformed flight data in {flights}: {e}")
        print(f"ERROR: Malformed flight data in {flights}: {e}")
        sys.exit(1)
    except AirpathError as e:
        message = e.args[0] if e.args else str(e)
        logger.error(f"Route search failed: {message}")
        print(f"ERROR: Route search failed: {message}")
        sys.exit(1)
    except KeyError as e:
        message = e.args[0] if e.args else str(e)
        logger.error(f"Unknown airport: {message}")
        print(f"ERROR: Unknown airport: {message}")
        sys.exit(1)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print(format_route(result))

    logger.info(f"Route search completed in {_format_duration(perf_counter() - start)}")


def _prompt(read: Optional[Callable[[str], str]] = None) -> None:
    """Run the interactive three-question session.

    Asks for the flight file, the per-airport cost and the two airports, then
    prints the route like the ``route`` command.
    """
    if read is None:
        read = input

    try:
        file_name = read("Flight data file name? ").strip()
        surcharge_text = read("Cost of using one airport? ").strip()
        try:
            surcharge = int(surcharge_text)
        except ValueError:
            surcharge = -1
        if surcharge < 0:
            logger.error(f"Invalid airport cost: {surcharge_text!r}")
            print(
                f"ERROR: Airport cost must be a non-negative integer, got {surcharge_text!r}"
            )
            sys.exit(1)

        airports = read("Airports traveling between? ").split()
        while len(airports) < 2:
            airports.extend(read("").split())
    except EOFError:
        logger.error("Input ended before all questions were answered")
        print("ERROR: Input ended before all questions were answered")
        sys.exit(1)
    src, dst = airports[0], airports[1]

    _route(Path(file_name), src, dst, surcharge)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``airpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="airpath",
        description="Find the cheapest route through a flight network.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,prompt}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Find the cheapest route")
    route_parser.add_argument(
        "flights", type=Path, help="Flight data file with 'from to cost' lines"
    )
    route_parser.add_argument("source", help="Departure airport")
    route_parser.add_argument("destination", help="Arrival airport")
    route_parser.add_argument(
        "--surcharge",
        "-s",
        type=_non_negative_int,
        default=ROUTE_CONFIG.airport_surcharge,
        help="Cost of using one airport (default: %(default)s)",
    )
    route_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    subparsers.add_parser("prompt", help="Ask for the inputs interactively")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "route":
        _route(
            flights=args.flights,
            src=args.source,
            dst=args.destination,
            surcharge=args.surcharge,
            as_json=args.json,
        )
    elif args.command == "prompt":
        _prompt()


if __name__ == "__main__":
    main()
