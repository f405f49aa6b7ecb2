"""Day 4: Ceres Search — word search over a letter grid."""

from __future__ import annotations

from collections.abc import Iterable

from advent.util.coordinate import Coordinate
from advent.util.grid import Matrix
from advent.util.parsing import ParseError

TITLE = "Ceres Search"

WORD = "XMAS"
_LETTERS = set("XMAS")


def parse_input(text: str) -> Matrix:
    matrix = Matrix.from_text(text)
    stray = set(matrix.data.ravel().tolist()) - _LETTERS
    if stray:
        raise ParseError(f"grid may only contain X, M, A, S; found {sorted(stray)}")
    return matrix


def _count_in(lines: Iterable[list[str]], word: str) -> int:
    targets = (word, word[::-1])
    total = 0
    for line in lines:
        text = "".join(line)
        total += sum(
            text[i:i + len(word)] in targets for i in range(len(text) - len(word) + 1)
        )
    return total


def part_1(matrix: Matrix) -> int:
    """Occurrences of XMAS in any straight direction, overlaps included."""
    return (
        _count_in(matrix.rows(), WORD)
        + _count_in(matrix.cols(), WORD)
        + _count_in(matrix.diagonals(), WORD)
        + _count_in(matrix.antidiagonals(), WORD)
    )


def part_2(matrix: Matrix) -> int:
    """Number of MAS pairs crossing in an X around a shared A."""
    crosses = {"MS", "SM"}
    total = 0
    for r in range(1, matrix.n_rows - 1):
        for c in range(1, matrix.n_cols - 1):
            centre = Coordinate(r, c)
            if matrix[centre] != "A":
                continue
            falling = matrix[centre.north_west()] + matrix[centre.south_east()]
            rising = matrix[centre.south_west()] + matrix[centre.north_east()]
            if falling in crosses and rising in crosses:
                total += 1
    return total
