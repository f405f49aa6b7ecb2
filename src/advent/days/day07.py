"""Day 7: Bridge Repair — find operators that make each equation true.

Operators are evaluated strictly left to right.  The search backtracks
over operator choices and abandons a branch as soon as the running value
overshoots the target, since every operator only makes values grow.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from advent.util.numbers import count_digits
from advent.util.parsing import ParseError, lines

TITLE = "Bridge Repair"

Operator = Callable[[int, int], int]


def add(a: int, b: int) -> int:
    return a + b


def multiply(a: int, b: int) -> int:
    return a * b


def combine(a: int, b: int) -> int:
    """Concatenate the digits: ``combine(12, 345) == 12345``."""
    return a * 10 ** count_digits(b) + b


PART_1_OPERATORS: tuple[Operator, ...] = (add, multiply)
PART_2_OPERATORS: tuple[Operator, ...] = (add, multiply, combine)


@dataclass(frozen=True)
class Calculation:
    result: int
    components: tuple[int, ...]


def parse_input(text: str) -> list[Calculation]:
    """Every line is ``<result>: <int> <int> ...``."""
    calculations: list[Calculation] = []
    for line in lines(text):
        head, sep, tail = line.partition(": ")
        fields = tail.split()
        if not sep or not head.isdigit() or not fields or not all(f.isdigit() for f in fields):
            raise ParseError(f"every line is `<int>: <int> <int> ...`, got {line!r}")
        calculations.append(Calculation(int(head), tuple(int(f) for f in fields)))
    return calculations


def is_solvable(calc: Calculation, operators: Sequence[Operator]) -> bool:
    def backtrack(acc: int, index: int) -> bool:
        if acc > calc.result:
            return False
        if index == len(calc.components):
            return acc == calc.result
        value = calc.components[index]
        return any(backtrack(op(acc, value), index + 1) for op in operators)

    return backtrack(calc.components[0], 1)


def part_1(calcs: list[Calculation]) -> int:
    return sum(c.result for c in calcs if is_solvable(c, PART_1_OPERATORS))


def part_2(calcs: list[Calculation]) -> int:
    return sum(c.result for c in calcs if is_solvable(c, PART_2_OPERATORS))
