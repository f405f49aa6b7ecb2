"""Day 13: Claw Contraption — a 2x2 linear system per machine.

Pressing button A ``x`` times and button B ``y`` times must land the
claw on the prize::

    ax * x + bx * y = px
    ay * x + by * y = py

With ``det = ax*by - bx*ay`` non-zero the system has exactly one
solution (Cramer's rule)::

    x = (px*by - bx*py) / det
    y = (ax*py - px*ay) / det

A machine is winnable only when both are non-negative integers, which is
checked with exact integer arithmetic.  A zero determinant means the
buttons are parallel; such machines are treated as unwinnable.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

from advent.util.parsing import ParseError, split_blocks

logger = logging.getLogger(__name__)

TITLE = "Claw Contraption"

COST_BUTTON_A = 3
COST_BUTTON_B = 1
PART_1_MAX_PRESSES = 100
PART_2_PRIZE_OFFSET = 10_000_000_000_000

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\s*\n"
    r"\s*Button B: X\+(\d+), Y\+(\d+)\s*\n"
    r"\s*Prize: X=(\d+), Y=(\d+)"
)


@dataclass(frozen=True)
class ClawMachine:
    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def solve(self) -> tuple[int, int] | None:
        """Presses ``(a, b)`` that reach the prize, or ``None``."""
        det = self.ax * self.by - self.bx * self.ay
        if det == 0:
            logger.debug("Machine %s has parallel buttons; skipping.", self)
            return None
        a, a_rem = divmod(self.px * self.by - self.bx * self.py, det)
        b, b_rem = divmod(self.ax * self.py - self.px * self.ay, det)
        if a_rem or b_rem or a < 0 or b < 0:
            return None
        return a, b

    def offset_prize(self, offset: int) -> ClawMachine:
        return replace(self, px=self.px + offset, py=self.py + offset)


def parse_input(text: str) -> list[ClawMachine]:
    machines: list[ClawMachine] = []
    for block in split_blocks(text):
        match = _MACHINE.fullmatch(block.strip())
        if match is None:
            raise ParseError(
                "each machine is `Button A: X+<int>, Y+<int>` / "
                f"`Button B: X+<int>, Y+<int>` / `Prize: X=<int>, Y=<int>`, got {block!r}"
            )
        ax, ay, bx, by, px, py = (int(g) for g in match.groups())
        machines.append(ClawMachine(ax=ax, ay=ay, bx=bx, by=by, px=px, py=py))
    return machines


def cost(presses: tuple[int, int]) -> int:
    return presses[0] * COST_BUTTON_A + presses[1] * COST_BUTTON_B


def part_1(machines: list[ClawMachine]) -> int:
    """Tokens needed to win every winnable prize with at most 100 presses each."""
    total = 0
    for machine in machines:
        presses = machine.solve()
        if presses and max(presses) <= PART_1_MAX_PRESSES:
            total += cost(presses)
    return total


def part_2(machines: list[ClawMachine]) -> int:
    """Same, with prizes moved by 10 trillion on both axes and no press cap."""
    total = 0
    for machine in machines:
        presses = machine.offset_prize(PART_2_PRIZE_OFFSET).solve()
        if presses:
            total += cost(presses)
    return total
