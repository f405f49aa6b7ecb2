"""Daily puzzle solvers.

Each ``dayNN`` module exposes ``TITLE``, ``parse_input(text)``,
``part_1(data)`` and ``part_2(data)``.  Parts never mutate their input, so
one parsed value can be shared by both.
"""

from __future__ import annotations
