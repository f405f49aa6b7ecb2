"""Integer helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable


def count_digits(n: int) -> int:
    """Number of decimal digits in a non-negative integer (0 has one)."""
    return len(str(abs(n)))


def add_count(counter: Counter, key: Hashable, n: int) -> None:
    """Add *n* occurrences of *key* to *counter*."""
    counter[key] += n
