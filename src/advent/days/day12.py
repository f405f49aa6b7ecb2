"""Day 12: Garden Groups — fence prices for connected plant regions.

Regions are 4-connected cells with the same plant.  A region's number of
straight sides equals its number of corners, and corners can be counted
cell by cell: for each diagonal direction a cell contributes an outer
corner when both adjacent orthogonal neighbours are foreign, and an inner
corner when both belong to the region but the diagonal cell does not.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from advent.util.coordinate import Coordinate
from advent.util.grid import Matrix

TITLE = "Garden Groups"


@dataclass
class Region:
    label: int
    plant: str
    cells: list[Coordinate] = field(default_factory=list)
    perimeter: int = 0
    corners: int = 0

    @property
    def area(self) -> int:
        return len(self.cells)


def parse_input(text: str) -> Matrix:
    return Matrix.from_text(text)


def watershed(matrix: Matrix) -> Matrix:
    """Label 4-connected regions of equal value ``0, 1, ...`` in row-major order."""
    labels = Matrix(np.full(matrix.shape, -1, dtype=int))
    label = 0
    for start in matrix.coords():
        if labels[start] != -1:
            continue
        value = matrix[start]
        labels[start] = label
        stack = [start]
        while stack:
            coord = stack.pop()
            for neighbor in coord.cardinals():
                if matrix.get(neighbor) == value and labels[neighbor] == -1:
                    labels[neighbor] = label
                    stack.append(neighbor)
        label += 1
    return labels


def equal_neighbors(coord: Coordinate, matrix: Matrix) -> int | None:
    """Cardinal neighbours holding the same value, ``None`` when off the grid."""
    if not matrix.in_bounds(coord):
        return None
    value = matrix[coord]
    return sum(matrix.get(n) == value for n in coord.cardinals())


def _corners(coord: Coordinate, labels: Matrix) -> int:
    label = labels[coord]
    n, e, s, w = (labels.get(x) == label for x in coord.cardinals())
    ne, se, sw, nw = (labels.get(x) == label for x in coord.diagonals())
    total = 0
    for side_a, side_b, diagonal in ((n, e, ne), (e, s, se), (s, w, sw), (w, n, nw)):
        if not side_a and not side_b:
            total += 1
        elif side_a and side_b and not diagonal:
            total += 1
    return total


def regions(matrix: Matrix) -> list[Region]:
    labels = watershed(matrix)
    found: dict[int, Region] = {}
    for coord in matrix.coords():
        label = labels[coord]
        region = found.setdefault(label, Region(label=label, plant=matrix[coord]))
        region.cells.append(coord)
        region.perimeter += 4 - equal_neighbors(coord, labels)
        region.corners += _corners(coord, labels)
    return list(found.values())


def part_1(matrix: Matrix) -> int:
    """Sum of area x perimeter."""
    return sum(r.area * r.perimeter for r in regions(matrix))


def part_2(matrix: Matrix) -> int:
    """Sum of area x number of sides."""
    return sum(r.area * r.corners for r in regions(matrix))
