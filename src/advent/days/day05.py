"""Day 5: Print Queue — page-ordering rules and safety-manual updates."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key

from advent.util.parsing import ParseError, split_blocks

TITLE = "Print Queue"


@dataclass
class PrintQueue:
    rules: dict[int, set[int]] = field(default_factory=dict)
    """Page -> pages that must be printed after it."""
    updates: list[list[int]] = field(default_factory=list)

    def must_precede(self, a: int, b: int) -> bool:
        return b in self.rules.get(a, ())

    def is_ordered(self, update: list[int]) -> bool:
        return all(
            not self.must_precede(later, earlier)
            for i, earlier in enumerate(update)
            for later in update[i + 1:]
        )

    def reorder(self, update: list[int]) -> list[int]:
        def compare(a: int, b: int) -> int:
            if self.must_precede(a, b):
                return -1
            if self.must_precede(b, a):
                return 1
            return 0

        return sorted(update, key=cmp_to_key(compare))


def parse_input(text: str) -> PrintQueue:
    """``a|b`` rule lines, a blank line, then comma-separated updates."""
    blocks = split_blocks(text)
    if len(blocks) != 2:
        raise ParseError("expected a block of rules and a block of updates")
    queue = PrintQueue()
    for line in blocks[0].splitlines():
        before, sep, after = line.strip().partition("|")
        if not sep or not before.isdigit() or not after.isdigit():
            raise ParseError(f"rules are `<int>|<int>`, got {line!r}")
        queue.rules.setdefault(int(before), set()).add(int(after))
    for line in blocks[1].splitlines():
        pages = line.strip().split(",")
        if not all(page.isdigit() for page in pages):
            raise ParseError(f"updates are `<int>,<int>,...`, got {line!r}")
        queue.updates.append([int(page) for page in pages])
    return queue


def _middle(update: list[int]) -> int:
    return update[len(update) // 2]


def part_1(queue: PrintQueue) -> int:
    """Sum of middle pages of the updates already in order."""
    return sum(_middle(u) for u in queue.updates if queue.is_ordered(u))


def part_2(queue: PrintQueue) -> int:
    """Sum of middle pages of the out-of-order updates once fixed."""
    return sum(
        _middle(queue.reorder(u)) for u in queue.updates if not queue.is_ordered(u)
    )
