"""Rectangular 2-D grids for the daily solvers.

:class:`Matrix` wraps a 2-D numpy array (chars, ints or bools) and adds
the traversals the puzzles keep needing: rows, columns, diagonals and
antidiagonals as plain Python lists, bounds-checked access through
:class:`~advent.util.coordinate.Coordinate`, and text round-tripping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from advent.util.coordinate import Coordinate
from advent.util.parsing import ParseError

logger = logging.getLogger(__name__)

Index = Coordinate | tuple[int, int]


def _rc(index: Index) -> tuple[int, int]:
    if isinstance(index, Coordinate):
        return index.r, index.c
    return int(index[0]), int(index[1])


class Matrix:
    """A rectangular grid addressed by ``(row, col)``."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Sequence[Sequence[Any]] | np.ndarray, dtype: Any = None) -> None:
        if isinstance(data, np.ndarray):
            array = data.copy() if dtype is None else data.astype(dtype)
        else:
            rows = [list(row) for row in data]
            if rows:
                width = len(rows[0])
                for i, row in enumerate(rows):
                    if len(row) != width:
                        raise ParseError(
                            f"row {i} has len {len(row)} while row 0 has len {width}"
                        )
            array = np.array(rows, dtype=dtype)
        if array.ndim != 2:
            raise ParseError(f"expected a 2-D grid, got {array.ndim} dimension(s)")
        self._data = array

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Matrix:
        """Character grid, one row per non-empty line."""
        rows = [list(line) for line in text.strip().splitlines() if line.strip()]
        return cls(rows, dtype="<U1")

    @classmethod
    def from_digits(cls, text: str) -> Matrix:
        """Integer grid from lines of single digits."""
        rows: list[list[int]] = []
        for r, line in enumerate(line for line in text.strip().splitlines() if line.strip()):
            if not line.strip().isdigit():
                raise ParseError(f"line {r} must contain only digits, got {line!r}")
            rows.append([int(ch) for ch in line.strip()])
        return cls(rows, dtype=int)

    @classmethod
    def new_like(cls, other: Matrix, fill: Any) -> Matrix:
        """A grid of *other*'s shape filled with *fill*."""
        return cls(np.full(other.shape, fill))

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def data(self) -> np.ndarray:
        """The underlying array (not a copy)."""
        return self._data

    @property
    def shape(self) -> tuple[int, int]:
        """``(n_rows, n_cols)``."""
        return int(self._data.shape[0]), int(self._data.shape[1])

    @property
    def n_rows(self) -> int:
        return self.shape[0]

    @property
    def n_cols(self) -> int:
        return self.shape[1]

    def row_range(self) -> range:
        return range(self.n_rows)

    def col_range(self) -> range:
        return range(self.n_cols)

    def coords(self) -> Iterator[Coordinate]:
        """Every coordinate in row-major order."""
        for r in self.row_range():
            for c in self.col_range():
                yield Coordinate(r, c)

    def in_bounds(self, index: Index) -> bool:
        r, c = _rc(index)
        return 0 <= r < self.n_rows and 0 <= c < self.n_cols

    def get(self, index: Index, default: Any = None) -> Any:
        """Value at *index*, or *default* when outside the grid."""
        if not self.in_bounds(index):
            return default
        return self._data[_rc(index)].item()

    def set(self, index: Index, value: Any) -> bool:
        """Set the value at *index*; ``False`` when outside the grid."""
        if not self.in_bounds(index):
            return False
        self._data[_rc(index)] = value
        return True

    def find(self, value: Any) -> list[Coordinate]:
        """Coordinates holding *value*, in row-major order."""
        return [Coordinate(int(r), int(c)) for r, c in zip(*np.nonzero(self._data == value))]

    def _checked(self, index: Index) -> tuple[int, int]:
        if not self.in_bounds(index):
            raise IndexError(f"{index} is outside a grid of shape {self.shape}")
        return _rc(index)

    def __getitem__(self, index: Index) -> Any:
        """Value at *index*; negative indices do not wrap."""
        return self._data[self._checked(index)].item()

    def __setitem__(self, index: Index, value: Any) -> None:
        self._data[self._checked(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape}, dtype={self._data.dtype})"

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def row(self, index: int) -> list[Any] | None:
        if not 0 <= index < self.n_rows:
            return None
        return self._data[index, :].tolist()

    def rows(self) -> Iterator[list[Any]]:
        for index in self.row_range():
            yield self._data[index, :].tolist()

    def col(self, index: int) -> list[Any] | None:
        if not 0 <= index < self.n_cols:
            return None
        return self._data[:, index].tolist()

    def cols(self) -> Iterator[list[Any]]:
        for index in self.col_range():
            yield self._data[:, index].tolist()

    def diagonal(self, index: int) -> list[Any] | None:
        """Top-left to bottom-right diagonal number *index*.

        Diagonals are numbered clockwise along the outside of the grid,
        from the bottom-left corner to the top-right corner::

            [2 3 4 5]
            [1 . . .]
            [0 . . .]

        For ``r`` rows and ``c`` columns the indices span ``0..=r+c-2``.
        """
        n_rows, n_cols = self.shape
        if not 0 <= index <= n_rows + n_cols - 2:
            return None
        return self._data.diagonal(offset=index - n_rows + 1).tolist()

    def diagonals(self) -> Iterator[list[Any]]:
        for index in range(sum(self.shape) - 1):
            yield self.diagonal(index)  # type: ignore[misc]

    def antidiagonal(self, index: int) -> list[Any] | None:
        """Bottom-left to top-right antidiagonal number *index*.

        Antidiagonals are numbered from the top-left corner to the
        bottom-right corner::

            [0 1 2 3]
            [. . . 4]
            [. . . 5]

        Elements are listed starting from the bottom-left end.
        """
        n_rows, n_cols = self.shape
        if not 0 <= index <= n_rows + n_cols - 2:
            return None
        return np.fliplr(self._data).diagonal(offset=n_cols - 1 - index)[::-1].tolist()

    def antidiagonals(self) -> Iterator[list[Any]]:
        for index in range(sum(self.shape) - 1):
            yield self.antidiagonal(index)  # type: ignore[misc]

    # ------------------------------------------------------------------
    # Copies and rendering
    # ------------------------------------------------------------------

    def slice(self, rows: range, cols: range) -> Matrix:
        """Copy of the sub-grid covering *rows* x *cols* (clipped to the grid)."""
        return Matrix(self._data[rows.start:rows.stop, cols.start:cols.stop])

    def copy(self) -> Matrix:
        return Matrix(self._data)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def render(self) -> str:
        """Text form, one line per row."""
        return "\n".join("".join(str(cell) for cell in row) for row in self._data.tolist())
