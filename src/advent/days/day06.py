"""Day 6: Guard Gallivant — simulate a patrolling guard.

The guard walks forward and turns right whenever an obstacle is directly
ahead, until stepping off the map.  Part 2 counts the positions where a
single new obstacle would trap the guard in a loop instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from advent.util.coordinate import Cardinal, Coordinate
from advent.util.grid import Matrix
from advent.util.parsing import ParseError

logger = logging.getLogger(__name__)

TITLE = "Guard Gallivant"

CHAR_EMPTY = "."
CHAR_OCCUPIED = "#"
_GUARD_CHARS = "^>v<"
_DIRECTIONS = [Cardinal.NORTH, Cardinal.EAST, Cardinal.SOUTH, Cardinal.WEST]
_DELTAS = [(d.offset.r, d.offset.c) for d in _DIRECTIONS]

State = tuple[int, int, int]
"""(row, col, index into _DIRECTIONS)."""


@dataclass
class Lab:
    obstacles: Matrix
    """True where the map is blocked."""
    guard: Coordinate
    facing: Cardinal = Cardinal.NORTH


def parse_input(text: str) -> Lab:
    grid = Matrix.from_text(text)
    guards = [coord for coord in grid.coords() if grid[coord] in _GUARD_CHARS]
    if len(guards) != 1:
        raise ParseError(f"expected exactly one guard, found {len(guards)}")
    stray = set(grid.data.ravel().tolist()) - set(CHAR_EMPTY + CHAR_OCCUPIED + _GUARD_CHARS)
    if stray:
        raise ParseError(f"unexpected map characters {sorted(stray)}")
    facing = Cardinal.from_char(grid[guards[0]])
    return Lab(obstacles=Matrix(grid.data == CHAR_OCCUPIED), guard=guards[0], facing=facing)


def _patrol(
    blocked: list[list[bool]],
    start: State,
    extra: tuple[int, int] | None = None,
) -> tuple[list[State], bool]:
    """Walk from *start*; return the visited states and whether they loop."""
    n_rows, n_cols = len(blocked), len(blocked[0])
    r, c, d = start
    seen: set[State] = set()
    path: list[State] = []
    while True:
        state = (r, c, d)
        if state in seen:
            return path, True
        seen.add(state)
        path.append(state)
        dr, dc = _DELTAS[d]
        nr, nc = r + dr, c + dc
        if not (0 <= nr < n_rows and 0 <= nc < n_cols):
            return path, False
        if blocked[nr][nc] or (nr, nc) == extra:
            d = (d + 1) % 4
        else:
            r, c = nr, nc


def _start(lab: Lab) -> State:
    return lab.guard.r, lab.guard.c, _DIRECTIONS.index(lab.facing)


def part_1(lab: Lab) -> int:
    """Distinct positions visited before leaving the map."""
    path, looped = _patrol(lab.obstacles.tolist(), _start(lab))
    if looped:
        logger.warning("Guard never leaves the map; counting the loop's cells.")
    return len({(r, c) for r, c, _ in path})


def part_2(lab: Lab) -> int:
    """Single-obstacle placements that make the guard loop forever.

    Only cells on the original route matter.  An obstacle on a cell first
    entered at step ``k`` leaves steps ``0..k-1`` unchanged, so each
    candidate is simulated from the state just before it.
    """
    blocked = lab.obstacles.tolist()
    start = _start(lab)
    path, _ = _patrol(blocked, start)
    tried: set[tuple[int, int]] = {(start[0], start[1])}
    loops = 0
    for before, state in zip(path, path[1:]):
        cell = (state[0], state[1])
        if cell in tried:
            continue
        tried.add(cell)
        _, looped = _patrol(blocked, before, extra=cell)
        loops += looped
    return loops
