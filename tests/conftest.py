"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest


@pytest.fixture
def write_flights(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes flight lines to a file under ``tmp_path``."""

    def _write(lines: Iterable[str], name: str = "flights.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def triangle_lines() -> list[str]:
    # Fares:
    #      [1]       [1]
    #  A◄───────►B◄───────►C
    #  ▲                   ▲
    #  └─────────[5]───────┘
    return ["A B 1", "B C 1", "A C 5"]
