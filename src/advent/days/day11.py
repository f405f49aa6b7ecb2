"""Day 11: Plutonian Pebbles — count stones after repeated blinks.

Stones with the same engraving evolve identically, so the line is kept
as ``engraving -> count`` and each blink rewrites the whole map.
"""

from __future__ import annotations

from collections import Counter

from advent.util.numbers import add_count, count_digits
from advent.util.parsing import ParseError

TITLE = "Plutonian Pebbles"

BLINKS_PART_1 = 25
BLINKS_PART_2 = 75
MULTIPLIER = 2024


def parse_input(text: str) -> Counter[int]:
    fields = text.split()
    if not fields or not all(f.isdigit() for f in fields):
        raise ParseError("expected space-separated non-negative integers")
    return Counter(int(f) for f in fields)


def blink(stones: Counter[int]) -> Counter[int]:
    """Apply one blink.

    - 0 becomes 1.
    - An even number of digits splits into two halves (leading zeros dropped).
    - Anything else is multiplied by 2024.
    """
    result: Counter[int] = Counter()
    for stone, n in stones.items():
        if stone == 0:
            add_count(result, 1, n)
            continue
        digits = count_digits(stone)
        if digits % 2 == 0:
            left, right = divmod(stone, 10 ** (digits // 2))
            add_count(result, left, n)
            add_count(result, right, n)
        else:
            add_count(result, stone * MULTIPLIER, n)
    return result


def count_after(stones: Counter[int], blinks: int) -> int:
    for _ in range(blinks):
        stones = blink(stones)
    return sum(stones.values())


def part_1(stones: Counter[int]) -> int:
    return count_after(stones, BLINKS_PART_1)


def part_2(stones: Counter[int]) -> int:
    return count_after(stones, BLINKS_PART_2)
