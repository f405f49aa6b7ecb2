"""Day 8: Resonant Collinearity — antinodes of same-frequency antennas.

For antennas ``a`` and ``b`` with ``d = a - b`` the antinodes lie at
``a + k*d`` and ``b - k*d``.  Part 1 only takes ``k = 1``; part 2 takes
every ``k >= 0`` that stays on the map, so the antennas themselves count.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations, count

from advent.util.coordinate import Coordinate
from advent.util.grid import Matrix

TITLE = "Resonant Collinearity"

IGNORE = "."


@dataclass
class AntennaMap:
    shape: tuple[int, int]
    antennas: dict[str, list[Coordinate]] = field(default_factory=dict)

    def contains(self, coord: Coordinate) -> bool:
        return coord.is_in(Coordinate(0, 0), Coordinate(*self.shape))

    def _ray(self, origin: Coordinate, delta: Coordinate, first: int, limit: int | None):
        for k in count(first):
            if limit is not None and k > limit:
                return
            point = origin + delta * k
            if not self.contains(point):
                return
            yield point

    def antinodes(self, harmonics: bool) -> set[Coordinate]:
        first, limit = (0, None) if harmonics else (1, 1)
        nodes: set[Coordinate] = set()
        for locations in self.antennas.values():
            for a, b in combinations(locations, 2):
                delta = a - b
                nodes.update(self._ray(a, delta, first, limit))
                nodes.update(self._ray(b, delta * -1, first, limit))
        return nodes


def parse_input(text: str) -> AntennaMap:
    grid = Matrix.from_text(text)
    antennas: dict[str, list[Coordinate]] = {}
    for coord in grid.coords():
        symbol = grid[coord]
        if symbol != IGNORE:
            antennas.setdefault(symbol, []).append(coord)
    return AntennaMap(shape=grid.shape, antennas=antennas)


def part_1(antenna_map: AntennaMap) -> int:
    return len(antenna_map.antinodes(harmonics=False))


def part_2(antenna_map: AntennaMap) -> int:
    return len(antenna_map.antinodes(harmonics=True))
