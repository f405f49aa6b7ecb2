"""Solve harness.

Loads puzzle inputs from the data directory, runs each day's pipeline,
times every stage, and optionally checks the answers against a JSON file
of known results.  A broken or missing input is reported on its own day
and never aborts the rest of the run.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable

from advent.config.settings import get_settings
from advent.registry import Puzzle, get_puzzle, list_puzzles

logger = logging.getLogger(__name__)

PARTS = (1, 2)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass
class DayResult:
    """Outcome of solving one day."""

    day: int
    title: str
    answers: dict[int, int] = field(default_factory=dict)
    """Answer per part number."""
    timings_ms: dict[str, float] = field(default_factory=dict)
    """Wall time per stage: ``parse``, ``part_1``, ``part_2``."""
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    @property
    def total_ms(self) -> float:
        return sum(self.timings_ms.values())


@dataclass
class RunReport:
    """Aggregate report over several days."""

    results: list[DayResult] = field(default_factory=list)
    total_time_ms: float = 0.0
    mismatches: list[str] = field(default_factory=list)

    @property
    def failed(self) -> list[DayResult]:
        return [r for r in self.results if not r.ok]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


def input_path(day: int, data_dir: Path | None = None) -> Path:
    """Where the input for ``day`` is expected: ``<data_dir>/dayNN.txt``."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    return Path(data_dir) / f"day{day:02d}.txt"


def load_input(day: int, data_dir: Path | None = None) -> str:
    path = input_path(day, data_dir)
    if not path.is_file():
        raise FileNotFoundError(f"No input for day {day}: expected {path}")
    return path.read_text(encoding="utf-8")


def load_answers(path: Path) -> dict[int, list[int | None]]:
    """Load expected answers from JSON.

    Expected format::

        {"1": [1320851, 26859182], "2": [639, null]}

    ``null`` marks an answer that is not known yet and is never checked.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("expected answers must be a JSON object keyed by day")
    answers: dict[int, list[int | None]] = {}
    for day, values in raw.items():
        if not isinstance(values, list) or len(values) > len(PARTS):
            raise ValueError(f"answers for day {day} must be a list of at most two values")
        answers[int(day)] = [None if v is None else int(v) for v in values]
    logger.info("Loaded expected answers for %d days from %s", len(answers), path)
    return answers


# ---------------------------------------------------------------------------
# Solving
# ---------------------------------------------------------------------------


def _timed(fn: Callable[..., Any], *args: Any) -> tuple[Any, float]:
    t0 = time.perf_counter()
    value = fn(*args)
    return value, (time.perf_counter() - t0) * 1000


def solve(puzzle: Puzzle, text: str, parts: Iterable[int] = PARTS) -> DayResult:
    """Parse ``text`` once and run the requested parts on it.

    A malformed input (``ParseError``) or an input a part cannot handle
    (``ValueError``) is recorded in :attr:`DayResult.error`.
    """
    result = DayResult(day=puzzle.day, title=puzzle.title)
    slow_ms = get_settings().slow_day_ms
    try:
        data, result.timings_ms["parse"] = _timed(puzzle.parse_input, text)
        for part in parts:
            if part not in PARTS:
                raise ValueError(f"part must be one of {PARTS}, got {part}")
            fn = puzzle.part_1 if part == 1 else puzzle.part_2
            answer, elapsed = _timed(fn, data)
            result.answers[part] = int(answer)
            result.timings_ms[f"part_{part}"] = elapsed
            if elapsed > slow_ms:
                logger.warning("Day %d part %d took %.0fms.", puzzle.day, part, elapsed)
    except ValueError as exc:
        result.error = f"{type(exc).__name__}: {exc}"
        logger.error("Day %d failed: %s", puzzle.day, result.error)
    return result


def run_days(
    days: Iterable[int] | None = None,
    data_dir: Path | None = None,
) -> RunReport:
    """Solve every requested day (all registered days by default)."""
    puzzles = list_puzzles() if days is None else [get_puzzle(d) for d in days]
    report = RunReport()
    t_start = time.perf_counter()

    for puzzle in puzzles:
        logger.info("Solving day %d: %s...", puzzle.day, puzzle.title)
        try:
            text = load_input(puzzle.day, data_dir)
        except FileNotFoundError as exc:
            logger.warning("%s", exc)
            report.results.append(DayResult(day=puzzle.day, title=puzzle.title, error=str(exc)))
            continue
        result = solve(puzzle, text)
        report.results.append(result)
        if result.ok:
            logger.info("  day %d solved in %.1fms", puzzle.day, result.total_ms)

    report.total_time_ms = (time.perf_counter() - t_start) * 1000
    logger.info(
        "Run complete: %d/%d days solved in %.1fs",
        len(report.results) - len(report.failed),
        len(report.results),
        report.total_time_ms / 1000,
    )
    return report


def check_answers(report: RunReport, expected: dict[int, list[int | None]]) -> list[str]:
    """Compare solved answers with ``expected``; returns one message per mismatch.

    Days without expectations, failed days and ``None`` expectations are skipped.
    The messages are also stored on ``report.mismatches``.
    """
    mismatches: list[str] = []
    for result in report.results:
        wanted = expected.get(result.day)
        if wanted is None or not result.ok:
            continue
        for part, value in zip(PARTS, wanted):
            if value is None or part not in result.answers:
                continue
            got = result.answers[part]
            if got != value:
                mismatches.append(f"day {result.day} part {part}: expected {value}, got {got}")
    for message in mismatches:
        logger.warning("Mismatch on %s", message)
    report.mismatches = mismatches
    return mismatches
