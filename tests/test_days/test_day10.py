"""Tests for day 10: Hoof It."""

from __future__ import annotations

from typing import Callable

import pytest

from advent.days.day10 import parse_input, part_1, part_2
from advent.util.parsing import ParseError

INPUT = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


class TestParseInput:
    def test_heights(self) -> None:
        heights = parse_input(INPUT)
        assert heights.shape == (8, 8)
        assert heights.row(0) == [8, 9, 0, 1, 0, 1, 2, 3]
        assert heights.col(7) == [3, 4, 5, 4, 3, 2, 1, 2]

    def test_rejects_impassable_tiles(self) -> None:
        with pytest.raises(ParseError):
            parse_input("0123\n1.34")


class TestParts:
    def test_single_trail(self) -> None:
        heights = parse_input("0123\n1234\n8765\n9876")
        assert part_1(heights) == 1
        assert part_2(heights) == 16

    def test_part_1_small(self) -> None:
        # trailhead scores in reading order: 5, 6, 5, 3, 1, 3, 5, 3, 5
        assert part_1(parse_input(INPUT)) == 36

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 81

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(10))) == 794

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(10))) == 1706
