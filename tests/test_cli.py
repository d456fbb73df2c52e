import json
import logging
from pathlib import Path

import pytest

from airpath import cli
from airpath.algorithms.types import PathResult
from airpath.exceptions import InvalidHandleError


def test_cli_route_text(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    cli.main(["route", str(path), "A", "C"])
    out = capsys.readouterr().out
    assert "Min cost from A to C is 2" in out
    assert "A --> B --> C" in out


def test_cli_route_surcharge_changes_route(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    cli.main(["route", str(path), "A", "C", "--surcharge", "3"])
    out = capsys.readouterr().out
    assert "Min cost from A to C is 11" in out
    assert "A --> C" in out


def test_cli_route_json(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    cli.main(["route", str(path), "C", "A", "--json"])
    captured = capsys.readouterr()
    # Log records go to stderr, leaving stdout parseable
    assert "Loading flights from" in captured.err
    data = json.loads(captured.out)
    assert data == {
        "source": "C",
        "destination": "A",
        "cost": 2,
        "path": ["C", "B", "A"],
        "reachable": True,
    }


def test_cli_route_unreachable(write_flights, capsys) -> None:
    path = write_flights(["A B 1", "C D 1"])
    cli.main(["route", str(path), "A", "D"])
    out = capsys.readouterr().out
    assert "No route from A to D" in out


def test_cli_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(tmp_path / "nope.txt"), "A", "B"])
    assert exc_info.value.code == 1
    assert "ERROR: Flight data file not found" in capsys.readouterr().out


def test_cli_malformed_file(write_flights, capsys) -> None:
    path = write_flights(["A B 1", "A C"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(path), "A", "B"])
    assert exc_info.value.code == 1
    assert "Line 2" in capsys.readouterr().out


def test_cli_unknown_airport(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(path), "A", "ZZZ"])
    assert exc_info.value.code == 1
    assert "ERROR: Unknown airport: Destination node 'ZZZ'" in capsys.readouterr().out


def test_cli_negative_surcharge_rejected_by_parser(write_flights, triangle_lines) -> None:
    path = write_flights(triangle_lines)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(path), "A", "C", "--surcharge", "-1"])
    assert exc_info.value.code == 2


def test_cli_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: airpath" in capsys.readouterr().out


def test_cli_verbose_enables_debug(write_flights, triangle_lines, monkeypatch) -> None:
    levels = []
    monkeypatch.setattr(cli, "set_global_log_level", levels.append)
    path = write_flights(triangle_lines)
    cli.main(["--verbose", "route", str(path), "A", "B"])
    assert levels == [logging.DEBUG]


def test_cli_prompt_session(write_flights, triangle_lines, monkeypatch, capsys) -> None:
    path = write_flights(triangle_lines)
    answers = iter([str(path), "0", "A C"])
    prompts = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)
    cli.main(["prompt"])

    assert prompts == [
        "Flight data file name? ",
        "Cost of using one airport? ",
        "Airports traveling between? ",
    ]
    out = capsys.readouterr().out
    assert "Min cost from A to C is 2" in out


def test_cli_prompt_airports_on_separate_lines(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    answers = iter([str(path), "3", "A", "C"])
    cli._prompt(lambda _prompt: next(answers))
    assert "Min cost from A to C is 11" in capsys.readouterr().out


def test_cli_prompt_rejects_bad_airport_cost(capsys) -> None:
    answers = iter(["flights.txt", "cheap"])
    with pytest.raises(SystemExit) as exc_info:
        cli._prompt(lambda _prompt: next(answers))
    assert exc_info.value.code == 1
    assert "non-negative integer" in capsys.readouterr().out


def test_format_route_custom_separator() -> None:
    result = PathResult(source="A", destination="C", cost=2, path=("A", "B", "C"))
    assert cli.format_route(result, separator=" > ") == "Min cost from A to C is 2\nA > B > C"


def test_cli_verbose_json_stays_parseable(write_flights, triangle_lines, capsys) -> None:
    path = write_flights(triangle_lines)
    cli.main(["--verbose", "route", str(path), "A", "C", "--json"])
    captured = capsys.readouterr()
    assert json.loads(captured.out)["path"] == ["A", "B", "C"]
    assert "SPF from 'A'" in captured.err


def test_cli_internal_error_is_not_reported_as_unknown_airport(
    write_flights, triangle_lines, monkeypatch, capsys
) -> None:
    def broken_search(graph, src, dst):
        raise InvalidHandleError("Handle (0, 1) refers to a removed entry")

    monkeypatch.setattr(cli, "shortest_path", broken_search)
    path = write_flights(triangle_lines)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(path), "A", "C"])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "ERROR: Route search failed: Handle (0, 1) refers to a removed entry" in out
    assert "Unknown airport" not in out


@pytest.mark.parametrize(
    "answers",
    [
        [],
        ["flights.txt"],
        ["flights.txt", "0"],
        ["flights.txt", "0", "A"],
    ],
)
def test_cli_prompt_end_of_input(answers, capsys) -> None:
    remaining = iter(answers)

    def read(_prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    with pytest.raises(SystemExit) as exc_info:
        cli._prompt(read)
    assert exc_info.value.code == 1
    assert "ERROR: Input ended before all questions were answered" in capsys.readouterr().out
