"""Day 1: Historian Hysteria — distance and similarity between two lists."""

from __future__ import annotations

from collections import Counter

from advent.util.parsing import ParseError, lines, parse_decimal

TITLE = "Historian Hysteria"


def parse_input(text: str) -> tuple[list[int], list[int]]:
    """Every line is ``<int>   <int>``."""
    left: list[int] = []
    right: list[int] = []
    for line in lines(text):
        first, rest = parse_decimal(line)
        if not rest[:1].isspace():
            raise ParseError(f'every line is "<int>    <int>", got {line!r}')
        second, rest = parse_decimal(rest.lstrip())
        if rest.strip():
            raise ParseError(f'every line is "<int>    <int>", got {line!r}')
        left.append(first)
        right.append(second)
    return left, right


def part_1(data: tuple[list[int], list[int]]) -> int:
    """Sum of distances between the sorted lists, paired up in order."""
    left, right = data
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_2(data: tuple[list[int], list[int]]) -> int:
    """Each left value times how often it occurs in the right list."""
    left, right = data
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)
