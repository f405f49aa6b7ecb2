"""Day 10: Hoof It — score hiking trails on a topographic map."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache

from advent.util.coordinate import Coordinate
from advent.util.grid import Matrix

TITLE = "Hoof It"

TRAILHEAD = 0
PEAK = 9


def parse_input(text: str) -> Matrix:
    return Matrix.from_digits(text)


def _climb(heights: Matrix) -> dict[Coordinate, Counter[Coordinate]]:
    """Map each trailhead to ``peak -> number of distinct trails``."""

    @lru_cache(maxsize=None)
    def trails_from(coord: Coordinate) -> Counter[Coordinate]:
        height = heights[coord]
        if height == PEAK:
            return Counter({coord: 1})
        found: Counter[Coordinate] = Counter()
        for neighbor in coord.cardinals():
            if heights.get(neighbor) == height + 1:
                found.update(trails_from(neighbor))
        return found

    return {head: trails_from(head) for head in heights.find(TRAILHEAD)}


def part_1(heights: Matrix) -> int:
    """Sum over trailheads of the distinct peaks they reach."""
    return sum(len(peaks) for peaks in _climb(heights).values())


def part_2(heights: Matrix) -> int:
    """Sum over trailheads of the distinct trails they start."""
    return sum(sum(peaks.values()) for peaks in _climb(heights).values())
