"""Day 2: Red-Nosed Reports — count safe level reports.

A report is safe when its levels are strictly monotonic and every
neighbouring pair differs by 1 to 3.  The problem dampener tolerates a
single bad level: a report also counts when removing one level makes it
safe.
"""

from __future__ import annotations

from advent.util.parsing import ParseError, lines

TITLE = "Red-Nosed Reports"

MAX_DELTA = 3


def parse_input(text: str) -> list[list[int]]:
    """Every line is ``<int> <int> ...``."""
    reports: list[list[int]] = []
    for line in lines(text):
        fields = line.split()
        if not all(field.isdigit() for field in fields):
            raise ParseError(f"every line is `<int> <int> ...`, got {line!r}")
        reports.append([int(field) for field in fields])
    return reports


def is_safe(levels: list[int], max_delta: int = MAX_DELTA) -> bool:
    deltas = [b - a for a, b in zip(levels, levels[1:])]
    if not deltas:
        return True
    if all(1 <= d <= max_delta for d in deltas):
        return True
    return all(-max_delta <= d <= -1 for d in deltas)


def is_safe_dampened(levels: list[int], max_delta: int = MAX_DELTA) -> bool:
    if is_safe(levels, max_delta):
        return True
    return any(
        is_safe(levels[:i] + levels[i + 1:], max_delta) for i in range(len(levels))
    )


def part_1(reports: list[list[int]]) -> int:
    return sum(is_safe(report) for report in reports)


def part_2(reports: list[list[int]]) -> int:
    return sum(is_safe_dampened(report) for report in reports)
