"""Shared test fixtures for advent.

Provides loaders for the full puzzle inputs (skipping when they are not
checked out) and a scratch data directory for runner and CLI tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture()
def full_input() -> Callable[[int], str]:
    """Return a loader for ``data/dayNN.txt`` that skips the test when absent."""

    def load(day: int) -> str:
        path = DATA_DIR / f"day{day:02d}.txt"
        if not path.is_file():
            pytest.skip(f"puzzle input {path.name} not available")
        return path.read_text(encoding="utf-8")

    return load


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    """A data directory holding example inputs for days 1 and 2."""
    (tmp_path / "day01.txt").write_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n", encoding="utf-8")
    (tmp_path / "day02.txt").write_text(
        "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n",
        encoding="utf-8",
    )
    return tmp_path
