"""Coordinates and cardinal directions on a 2-D grid.

Coordinates are ``(row, col)`` pairs: north decreases the row, east
increases the column.  They support vector arithmetic so that offsets can
be added, subtracted, and scaled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from advent.util.parsing import ParseError


@dataclass(frozen=True, order=True)
class Coordinate:
    """An integer ``(row, col)`` position or offset."""

    r: int = 0
    c: int = 0

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.r + other.r, self.c + other.c)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.r - other.r, self.c - other.c)

    def __mul__(self, factor: int) -> Coordinate:
        return Coordinate(self.r * factor, self.c * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.r
        yield self.c

    def is_in(self, lower: Coordinate, upper: Coordinate) -> bool:
        """True when ``lower <= self < upper`` component-wise."""
        return lower.r <= self.r < upper.r and lower.c <= self.c < upper.c

    # ------------------------------------------------------------------
    # Neighbours
    # ------------------------------------------------------------------

    def north(self) -> Coordinate:
        return Coordinate(self.r - 1, self.c)

    def east(self) -> Coordinate:
        return Coordinate(self.r, self.c + 1)

    def south(self) -> Coordinate:
        return Coordinate(self.r + 1, self.c)

    def west(self) -> Coordinate:
        return Coordinate(self.r, self.c - 1)

    def north_east(self) -> Coordinate:
        return Coordinate(self.r - 1, self.c + 1)

    def south_east(self) -> Coordinate:
        return Coordinate(self.r + 1, self.c + 1)

    def south_west(self) -> Coordinate:
        return Coordinate(self.r + 1, self.c - 1)

    def north_west(self) -> Coordinate:
        return Coordinate(self.r - 1, self.c - 1)

    def cardinals(self) -> list[Coordinate]:
        """Neighbours in N, E, S, W order."""
        return [self.north(), self.east(), self.south(), self.west()]

    def diagonals(self) -> list[Coordinate]:
        """Neighbours in NE, SE, SW, NW order."""
        return [self.north_east(), self.south_east(), self.south_west(), self.north_west()]

    def neighbors(self) -> list[Coordinate]:
        """All 8 surrounding coordinates, clockwise starting north."""
        return [
            self.north(),
            self.north_east(),
            self.east(),
            self.south_east(),
            self.south(),
            self.south_west(),
            self.west(),
            self.north_west(),
        ]

    def step(self, direction: Cardinal, n: int = 1) -> Coordinate:
        """Move *n* steps towards *direction*."""
        return self + direction.offset * n


class Cardinal(Enum):
    """The four compass directions, in clockwise order."""

    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    @property
    def offset(self) -> Coordinate:
        return _OFFSETS[self]

    def clockwise(self) -> Cardinal:
        return _ORDER[(_ORDER.index(self) + 1) % 4]

    def counter_clockwise(self) -> Cardinal:
        return _ORDER[(_ORDER.index(self) - 1) % 4]

    def opposite(self) -> Cardinal:
        return _ORDER[(_ORDER.index(self) + 2) % 4]

    @classmethod
    def from_char(cls, char: str) -> Cardinal:
        """Parse one of ``^ > v <``."""
        try:
            return cls(char)
        except ValueError:
            raise ParseError(f"expected one of '^>v<', got {char!r}") from None


_ORDER: list[Cardinal] = [Cardinal.NORTH, Cardinal.EAST, Cardinal.SOUTH, Cardinal.WEST]

_OFFSETS: dict[Cardinal, Coordinate] = {
    Cardinal.NORTH: Coordinate(-1, 0),
    Cardinal.EAST: Coordinate(0, 1),
    Cardinal.SOUTH: Coordinate(1, 0),
    Cardinal.WEST: Coordinate(0, -1),
}

CARDINAL_OFFSETS: list[Coordinate] = [_OFFSETS[d] for d in _ORDER]
