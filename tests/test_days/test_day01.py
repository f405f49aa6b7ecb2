"""Tests for day 1: Historian Hysteria."""

from __future__ import annotations

from typing import Callable

import pytest

from advent.days.day01 import parse_input, part_1, part_2
from advent.util.parsing import ParseError

INPUT = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""


class TestParseInput:
    def test_two_columns(self) -> None:
        assert parse_input(INPUT) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])

    def test_missing_column(self) -> None:
        with pytest.raises(ParseError):
            parse_input("3   4\n5\n")

    def test_trailing_junk(self) -> None:
        with pytest.raises(ParseError):
            parse_input("3   4x\n")


class TestParts:
    def test_part_1_small(self) -> None:
        assert part_1(parse_input(INPUT)) == 11

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 31

    def test_parts_do_not_mutate(self) -> None:
        data = parse_input(INPUT)
        part_1(data)
        assert data == parse_input(INPUT)

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(1))) == 1320851

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(1))) == 26859182
