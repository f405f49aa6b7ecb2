"""Tests for day 8: Resonant Collinearity."""

from __future__ import annotations

from typing import Callable

from advent.days.day08 import parse_input, part_1, part_2
from advent.util.coordinate import Coordinate

INPUT = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


PAIR = """\
..........
..........
..........
....a.....
..........
.....a....
..........
..........
..........
..........
"""


class TestParseInput:
    def test_antennas(self) -> None:
        antenna_map = parse_input(INPUT)
        assert antenna_map.shape == (12, 12)
        assert antenna_map.antennas == {
            "0": [Coordinate(1, 8), Coordinate(2, 5), Coordinate(3, 7), Coordinate(4, 4)],
            "A": [Coordinate(5, 6), Coordinate(8, 8), Coordinate(9, 9)],
        }


class TestAntinodes:
    def test_single_pair(self) -> None:
        antenna_map = parse_input(PAIR)
        assert antenna_map.antinodes(harmonics=False) == {Coordinate(1, 3), Coordinate(7, 6)}

    def test_off_map_antinodes_dropped(self) -> None:
        antenna_map = parse_input("a.a")
        assert antenna_map.antinodes(harmonics=False) == set()

    def test_harmonics_include_antennas(self) -> None:
        antenna_map = parse_input("a.a")
        assert antenna_map.antinodes(harmonics=True) == {Coordinate(0, 0), Coordinate(0, 2)}


class TestParts:
    def test_part_1_small(self) -> None:
        assert part_1(parse_input(INPUT)) == 14

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 34

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(8))) == 265

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(8))) == 962
