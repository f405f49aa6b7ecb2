"""Day 14: Restroom Redoubt — robots drifting around a wrapping room."""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from advent.util.parsing import ParseError, lines

TITLE = "Restroom Redoubt"

WIDTH = 101
HEIGHT = 103
STEPS_PART_1 = 100
SEARCH_LIMIT_PART_2 = 10_000

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


@dataclass
class Room:
    positions: np.ndarray
    """``(n, 2)`` array of ``(x, y)``."""
    velocities: np.ndarray
    width: int = WIDTH
    height: int = HEIGHT

    def positions_after(self, seconds: int) -> np.ndarray:
        size = np.array([self.width, self.height])
        return np.mod(self.positions + self.velocities * seconds, size)

    def safety_factor(self, seconds: int) -> int:
        """Product of robot counts per quadrant; the middle row and column are excluded."""
        xs, ys = self.positions_after(seconds).T
        mid_x, mid_y = self.width // 2, self.height // 2
        left, right = xs < mid_x, xs > self.width - 1 - mid_x
        top, bottom = ys < mid_y, ys > self.height - 1 - mid_y
        counts = [
            int(np.count_nonzero(h & v))
            for h in (left, right)
            for v in (top, bottom)
        ]
        return int(np.prod(counts))


def parse_input(text: str, width: int = WIDTH, height: int = HEIGHT) -> Room:
    """Every line is ``p=<x>,<y> v=<dx>,<dy>``."""
    rows: list[list[int]] = []
    for line in lines(text):
        match = _ROBOT.fullmatch(line)
        if match is None:
            raise ParseError(f"every line is `p=<x>,<y> v=<dx>,<dy>`, got {line!r}")
        rows.append([int(g) for g in match.groups()])
    if not rows:
        raise ParseError("expected at least one robot")
    data = np.array(rows, dtype=np.int64)
    return Room(positions=data[:, :2], velocities=data[:, 2:], width=width, height=height)


def part_1(room: Room) -> int:
    return room.safety_factor(STEPS_PART_1)


def part_2(room: Room) -> int:
    """The first second with the lowest safety factor.

    A picture (the Christmas tree) clusters the robots, which starves some
    quadrants and so minimises the safety factor.
    """
    limit = min(SEARCH_LIMIT_PART_2, room.width * room.height)
    factors = [room.safety_factor(seconds) for seconds in range(limit)]
    return int(np.argmin(factors))
