"""Tests for coordinates and compass directions."""

from __future__ import annotations

import pytest

from advent.util.coordinate import CARDINAL_OFFSETS, Cardinal, Coordinate
from advent.util.parsing import ParseError


class TestCoordinate:
    def test_arithmetic(self) -> None:
        a, b = Coordinate(1, 2), Coordinate(3, -1)
        assert a + b == Coordinate(4, 1)
        assert a - b == Coordinate(-2, 3)
        assert a * 3 == Coordinate(3, 6)
        assert 2 * a == Coordinate(2, 4)

    def test_unpacking(self) -> None:
        r, c = Coordinate(5, 7)
        assert (r, c) == (5, 7)

    def test_neighbours(self) -> None:
        origin = Coordinate(1, 1)
        assert origin.cardinals() == [
            Coordinate(0, 1), Coordinate(1, 2), Coordinate(2, 1), Coordinate(1, 0),
        ]
        assert origin.diagonals() == [
            Coordinate(0, 2), Coordinate(2, 2), Coordinate(2, 0), Coordinate(0, 0),
        ]
        assert len(set(origin.neighbors())) == 8
        assert origin not in origin.neighbors()

    def test_is_in(self) -> None:
        lower, upper = Coordinate(0, 0), Coordinate(3, 3)
        assert Coordinate(2, 2).is_in(lower, upper)
        assert not Coordinate(3, 0).is_in(lower, upper)
        assert not Coordinate(0, -1).is_in(lower, upper)

    def test_step(self) -> None:
        assert Coordinate(5, 5).step(Cardinal.NORTH, 2) == Coordinate(3, 5)
        assert Coordinate(5, 5).step(Cardinal.WEST) == Coordinate(5, 4)

    def test_hashable(self) -> None:
        assert len({Coordinate(1, 1), Coordinate(1, 1), Coordinate(0, 1)}) == 2


class TestCardinal:
    def test_rotation(self) -> None:
        assert Cardinal.NORTH.clockwise() is Cardinal.EAST
        assert Cardinal.NORTH.counter_clockwise() is Cardinal.WEST
        assert Cardinal.WEST.clockwise() is Cardinal.NORTH
        assert Cardinal.EAST.opposite() is Cardinal.WEST

    def test_four_turns_return_home(self) -> None:
        facing = Cardinal.SOUTH
        for _ in range(4):
            facing = facing.clockwise()
        assert facing is Cardinal.SOUTH

    def test_from_char(self) -> None:
        assert [Cardinal.from_char(ch) for ch in "^>v<"] == list(Cardinal)

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ParseError):
            Cardinal.from_char("x")

    def test_offsets(self) -> None:
        assert CARDINAL_OFFSETS == [
            Coordinate(-1, 0), Coordinate(0, 1), Coordinate(1, 0), Coordinate(0, -1),
        ]
