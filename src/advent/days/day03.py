"""Day 3: Mull It Over — recover multiplications from corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass

TITLE = "Mull It Over"

_INSTRUCTION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


@dataclass(frozen=True)
class Mul:
    left: int
    right: int


@dataclass(frozen=True)
class Do:
    pass


@dataclass(frozen=True)
class Dont:
    pass


Instruction = Mul | Do | Dont


def parse_input(text: str) -> list[Instruction]:
    """Every well-formed instruction in the order it appears; noise is skipped."""
    instructions: list[Instruction] = []
    for match in _INSTRUCTION.finditer(text):
        token = match.group()
        if token == "do()":
            instructions.append(Do())
        elif token == "don't()":
            instructions.append(Dont())
        else:
            instructions.append(Mul(int(match.group(1)), int(match.group(2))))
    return instructions


def part_1(instructions: list[Instruction]) -> int:
    """Sum of all ``mul(a,b)`` products."""
    return sum(i.left * i.right for i in instructions if isinstance(i, Mul))


def part_2(instructions: list[Instruction]) -> int:
    """Sum of products while enabled; ``do()``/``don't()`` toggle the state."""
    enabled = True
    total = 0
    for instruction in instructions:
        if isinstance(instruction, Do):
            enabled = True
        elif isinstance(instruction, Dont):
            enabled = False
        elif enabled:
            total += instruction.left * instruction.right
    return total
