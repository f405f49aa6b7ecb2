"""Shared building blocks: coordinates, grids and parsing helpers."""

from __future__ import annotations

from advent.util.coordinate import CARDINAL_OFFSETS, Cardinal, Coordinate
from advent.util.grid import Matrix
from advent.util.numbers import add_count, count_digits
from advent.util.parsing import ParseError, parse_decimal, parse_ints

__all__ = [
    "CARDINAL_OFFSETS",
    "Cardinal",
    "Coordinate",
    "Matrix",
    "ParseError",
    "add_count",
    "count_digits",
    "parse_decimal",
    "parse_ints",
]
