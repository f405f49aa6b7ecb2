"""Puzzle registry — auto-discover the daily solvers.

Provides :func:`get_registry` which lazily imports every ``dayNN`` module
from the :mod:`advent.days` package and exposes it as a :class:`Puzzle`
keyed by day number.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import re
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable

logger = logging.getLogger(__name__)

_DAY_MODULE = re.compile(r"day(\d{2})")

_registry: dict[int, Puzzle] | None = None


@dataclass(frozen=True)
class Puzzle:
    """One day's solver pipeline."""

    day: int
    title: str
    parse_input: Callable[[str], Any]
    part_1: Callable[[Any], int]
    part_2: Callable[[Any], int]

    @property
    def name(self) -> str:
        return f"day{self.day:02d}"

    @classmethod
    def from_module(cls, day: int, module: ModuleType) -> Puzzle:
        return cls(
            day=day,
            title=getattr(module, "TITLE", module.__name__),
            parse_input=module.parse_input,
            part_1=module.part_1,
            part_2=module.part_2,
        )


def _discover_puzzles() -> dict[int, Puzzle]:
    """Import all ``dayNN`` modules in ``advent.days``."""
    import advent.days as pkg

    registry: dict[int, Puzzle] = {}
    for _finder, mod_name, _is_pkg in pkgutil.iter_modules(pkg.__path__):
        match = _DAY_MODULE.fullmatch(mod_name)
        if match is None:
            continue
        module = importlib.import_module(f"advent.days.{mod_name}")
        day = int(match.group(1))
        registry[day] = Puzzle.from_module(day, module)
    logger.debug("Discovered %d puzzles.", len(registry))
    return dict(sorted(registry.items()))


def get_registry() -> dict[int, Puzzle]:
    """Return the puzzle registry (lazily discovered)."""
    global _registry
    if _registry is None:
        _registry = _discover_puzzles()
    return _registry


def reset_registry() -> None:
    """Force re-discovery on next :func:`get_registry` call."""
    global _registry
    _registry = None


def get_puzzle(day: int) -> Puzzle:
    """Look up a day's puzzle; raises ``KeyError`` for unknown days."""
    registry = get_registry()
    try:
        return registry[day]
    except KeyError:
        raise KeyError(f"No solver for day {day}. Available: {sorted(registry)}") from None


def list_puzzles() -> list[Puzzle]:
    """All registered puzzles, ordered by day."""
    return list(get_registry().values())
