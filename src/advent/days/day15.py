"""Day 15: Warehouse Woes — a robot pushing boxes around a warehouse.

Both the narrow and the widened warehouse use one push routine: starting
from the robot, collect every box cell that the move would shove
(breadth-first, pulling in the other half of wide boxes), abort when any
of them would hit a wall, otherwise shift them all by one step.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from advent.util.coordinate import Cardinal, Coordinate
from advent.util.grid import Matrix
from advent.util.parsing import ParseError, lines

logger = logging.getLogger(__name__)

TITLE = "Warehouse Woes"

ROBOT = "@"
WALL = "#"
EMPTY = "."
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"

WIDENED: dict[str, str] = {
    WALL: WALL + WALL,
    BOX: BOX_LEFT + BOX_RIGHT,
    EMPTY: EMPTY + EMPTY,
    ROBOT: ROBOT + EMPTY,
}


@dataclass
class Warehouse:
    grid: Matrix
    """The map with the robot's cell left empty."""
    robot: Coordinate
    moves: list[Cardinal] = field(default_factory=list)

    def widen(self) -> Warehouse:
        """Double every tile horizontally; the robot keeps the left half."""
        rows = ["".join(WIDENED[cell] for cell in row) for row in self.grid.rows()]
        return Warehouse(
            grid=Matrix([list(row) for row in rows], dtype="<U1"),
            robot=Coordinate(self.robot.r, self.robot.c * 2),
            moves=list(self.moves),
        )

    def render(self) -> str:
        grid = self.grid.copy()
        grid[self.robot] = ROBOT
        return grid.render()


def parse_input(text: str) -> Warehouse:
    """The map (rows starting with ``#``) followed by the moves.

    A blank line between the two sections is optional; the moves may be
    wrapped over several lines.  Walls must enclose the map.
    """
    rows = lines(text)
    split = next((i for i, row in enumerate(rows) if not row.startswith(WALL)), len(rows))
    if split == 0 or split == len(rows):
        raise ParseError("expected a warehouse map followed by the moves")
    grid = Matrix.from_text("\n".join(rows[:split]))
    stray = set(grid.data.ravel().tolist()) - set(WIDENED)
    if stray:
        raise ParseError(f"unexpected map characters {sorted(stray)}")
    border = grid.row(0) + grid.row(grid.n_rows - 1) + grid.col(0) + grid.col(grid.n_cols - 1)
    if any(tile != WALL for tile in border):
        raise ParseError("the warehouse map must be enclosed by walls")
    robots = grid.find(ROBOT)
    if len(robots) != 1:
        raise ParseError(f"expected exactly one robot, found {len(robots)}")
    grid[robots[0]] = EMPTY
    moves = [Cardinal.from_char(ch) for ch in "".join(rows[split:])]
    return Warehouse(grid=grid, robot=robots[0], moves=moves)


def _try_move(grid: Matrix, robot: Coordinate, direction: Cardinal) -> Coordinate:
    """Move the robot one step if possible, pushing boxes; returns its new position."""
    offset = direction.offset
    seen: set[Coordinate] = set()
    queue = deque([robot])
    while queue:
        cell = queue.popleft()
        ahead = cell + offset
        tile = grid[ahead]
        if tile == WALL:
            return robot
        if tile == EMPTY:
            continue
        parts = [ahead]
        if tile == BOX_LEFT:
            parts.append(ahead.east())
        elif tile == BOX_RIGHT:
            parts.append(ahead.west())
        for part in parts:
            if part not in seen:
                seen.add(part)
                queue.append(part)

    tiles = {cell: grid[cell] for cell in seen}
    for cell in seen:
        grid[cell] = EMPTY
    for cell, tile in tiles.items():
        grid[cell + offset] = tile
    return robot + offset


def simulate(warehouse: Warehouse) -> Matrix:
    """Run every move on a copy of the map and return the final map."""
    grid = warehouse.grid.copy()
    robot = warehouse.robot
    for direction in warehouse.moves:
        robot = _try_move(grid, robot, direction)
    logger.debug("Robot finished at %s after %d moves.", robot, len(warehouse.moves))
    return grid


def gps_sum(grid: Matrix) -> int:
    """Sum of ``100 * row + col`` over every box (left edge for wide boxes)."""
    return sum(
        100 * coord.r + coord.c
        for tile in (BOX, BOX_LEFT)
        for coord in grid.find(tile)
    )


def part_1(warehouse: Warehouse) -> int:
    return gps_sum(simulate(warehouse))


def part_2(warehouse: Warehouse) -> int:
    return gps_sum(simulate(warehouse.widen()))
