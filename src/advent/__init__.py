"""advent — Advent of Code 2024 solvers, days 1-16.

Every day lives in :mod:`advent.days` as a ``parse_input`` / ``part_1`` /
``part_2`` pipeline on top of the shared grid and parsing helpers in
:mod:`advent.util`.
"""

from __future__ import annotations

__version__ = "0.2.0"

__all__ = ["__version__"]
