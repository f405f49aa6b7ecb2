"""Tests for day 2: Red-Nosed Reports."""

from __future__ import annotations

from typing import Callable

import pytest

from advent.days.day02 import is_safe, is_safe_dampened, parse_input, part_1, part_2
from advent.util.parsing import ParseError

INPUT = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"


class TestParseInput:
    def test_reports(self) -> None:
        assert parse_input(INPUT) == [
            [7, 6, 4, 2, 1],
            [1, 2, 7, 8, 9],
            [9, 7, 6, 2, 1],
            [1, 3, 2, 4, 5],
            [8, 6, 4, 4, 1],
            [1, 3, 6, 7, 9],
        ]

    def test_rejects_words(self) -> None:
        with pytest.raises(ParseError):
            parse_input("1 2 three")


class TestSafety:
    def test_decreasing_is_safe(self) -> None:
        assert is_safe([7, 6, 4, 2, 1])

    def test_jump_too_large(self) -> None:
        assert not is_safe([1, 2, 7, 8, 9])

    def test_flat_step_unsafe(self) -> None:
        assert not is_safe([8, 6, 4, 4, 1])

    def test_dampener_removes_one_level(self) -> None:
        assert is_safe_dampened([1, 3, 2, 4, 5])
        assert is_safe_dampened([8, 6, 4, 4, 1])
        assert not is_safe_dampened([9, 7, 6, 2, 1])

    def test_dampener_can_drop_first_level(self) -> None:
        assert is_safe_dampened([10, 1, 2, 3])


class TestParts:
    def test_part_1_small(self) -> None:
        assert part_1(parse_input(INPUT)) == 2

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 4

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(2))) == 639

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(2))) == 674
