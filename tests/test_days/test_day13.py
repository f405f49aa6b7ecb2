"""Tests for day 13: Claw Contraption."""

from __future__ import annotations

from typing import Callable

import pytest

from advent.days.day13 import ClawMachine, cost, parse_input, part_1, part_2
from advent.util.parsing import ParseError

INPUT = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


class TestParseInput:
    def test_machines(self) -> None:
        machines = parse_input(INPUT)
        assert len(machines) == 4
        assert machines[0] == ClawMachine(ax=94, ay=34, bx=22, by=67, px=8400, py=5400)
        assert machines[3] == ClawMachine(ax=69, ay=23, bx=27, by=71, px=18641, py=10279)

    def test_malformed_block(self) -> None:
        with pytest.raises(ParseError):
            parse_input("Button A: X+94, Y+34\nPrize: X=8400, Y=5400\n")


class TestClawMachine:
    def test_solve(self) -> None:
        machines = parse_input(INPUT)
        assert machines[0].solve() == (80, 40)
        assert machines[1].solve() is None
        assert machines[2].solve() == (38, 86)
        assert machines[3].solve() is None

    def test_cost(self) -> None:
        assert cost((80, 40)) == 280

    def test_parallel_buttons(self) -> None:
        assert ClawMachine(ax=1, ay=1, bx=2, by=2, px=4, py=4).solve() is None

    def test_negative_presses_rejected(self) -> None:
        # x = 2, y = -1 solves the system but cannot be pressed
        assert ClawMachine(ax=1, ay=0, bx=0, by=1, px=2, py=-1).solve() is None

    def test_offset_prize(self) -> None:
        machine = parse_input(INPUT)[1].offset_prize(10_000_000_000_000)
        assert (machine.px, machine.py) == (10000000012748, 10000000012176)
        assert machine.solve() is not None


class TestParts:
    def test_part_1_small(self) -> None:
        assert part_1(parse_input(INPUT)) == 480

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 875318608908

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(13))) == 34393

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(13))) == 83551068361379
