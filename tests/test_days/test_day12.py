"""Tests for day 12: Garden Groups."""

from __future__ import annotations

from typing import Callable

from advent.days.day12 import equal_neighbors, parse_input, part_1, part_2, regions, watershed
from advent.util.coordinate import Coordinate

INPUT = "AAAA\nBBCD\nBBCC\nEEEC"
INPUT_NESTED = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO"
INPUT_E = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE"
INPUT_AB = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA"
INPUT_LARGE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


class TestWatershed:
    def test_labels(self) -> None:
        assert watershed(parse_input(INPUT)).tolist() == [
            [0, 0, 0, 0],
            [1, 1, 2, 3],
            [1, 1, 2, 2],
            [4, 4, 4, 2],
        ]

    def test_same_plant_separate_regions(self) -> None:
        labels = watershed(parse_input(INPUT_NESTED))
        assert len(set(labels.data.ravel().tolist())) == 5

    def test_equal_neighbors(self) -> None:
        matrix = parse_input(INPUT)
        counts = [
            [equal_neighbors(Coordinate(r, c), matrix) for c in matrix.col_range()]
            for r in matrix.row_range()
        ]
        assert counts == [
            [1, 2, 2, 1],
            [2, 2, 1, 0],
            [2, 2, 2, 2],
            [1, 2, 1, 1],
        ]

    def test_equal_neighbors_off_grid(self) -> None:
        assert equal_neighbors(Coordinate(4, 0), parse_input(INPUT)) is None


class TestRegions:
    def test_region_measures(self) -> None:
        found = {r.plant: r for r in regions(parse_input(INPUT))}
        assert (found["A"].area, found["A"].perimeter, found["A"].corners) == (4, 10, 4)
        assert (found["C"].area, found["C"].perimeter, found["C"].corners) == (4, 10, 8)
        assert (found["D"].area, found["D"].perimeter, found["D"].corners) == (1, 4, 4)


class TestParts:
    def test_part_1_small(self) -> None:
        assert part_1(parse_input(INPUT)) == 140
        assert part_1(parse_input(INPUT_NESTED)) == 772
        assert part_1(parse_input(INPUT_LARGE)) == 1930

    def test_part_2_small(self) -> None:
        assert part_2(parse_input(INPUT)) == 80
        assert part_2(parse_input(INPUT_NESTED)) == 436
        assert part_2(parse_input(INPUT_E)) == 236
        assert part_2(parse_input(INPUT_AB)) == 368
        assert part_2(parse_input(INPUT_LARGE)) == 1206

    def test_part_1_full(self, full_input: Callable[[int], str]) -> None:
        assert part_1(parse_input(full_input(12))) == 1434856

    def test_part_2_full(self, full_input: Callable[[int], str]) -> None:
        assert part_2(parse_input(full_input(12))) == 891106
