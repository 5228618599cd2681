# crucible_lab/core/grid.py
# Immutable weighted grid: one non-negative integer entry cost per cell, addressed by (col, row).
from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .errors import MalformedGridError

Cell = Tuple[int, int]  # (col, row)

GridLike = Union[Sequence[Sequence[int]], np.ndarray]


class CostGrid:
    """
    Rectangular matrix of traversal costs.

    - Rows all have the same length and the grid is at least 1x1.
    - Costs are ints >= 0; `cost(cell)` is the price of ENTERING that cell.
    - The backing numpy array is read-only, so a grid can be shared by
      any number of searches (or threads) without copying.
    """

    def __init__(self, rows: GridLike):
        arr = _validated_array(rows)
        arr.setflags(write=False)
        self._arr = arr
        # plain tuples are much faster than numpy scalar indexing in the hot loop
        self._rows: Tuple[Tuple[int, ...], ...] = tuple(map(tuple, arr.tolist()))
        self.height, self.width = arr.shape

    @classmethod
    def from_text(cls, text: str) -> "CostGrid":
        """Parse a digit grid: one row per line, one 0-9 cost per character."""
        lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
        if not lines:
            raise MalformedGridError("grid text is empty")
        rows: List[List[int]] = []
        for r, line in enumerate(lines):
            row = []
            for c, ch in enumerate(line):
                if not ch.isdigit() or not ch.isascii():
                    raise MalformedGridError(f"non-digit {ch!r} at (col={c}, row={r})")
                row.append(int(ch))
            rows.append(row)
        return cls(rows)

    # ---- geometry -------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def top_left(self) -> Cell:
        return (0, 0)

    @property
    def bottom_right(self) -> Cell:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    # ---- costs ----------------------------------------------------------

    def cost(self, cell: Cell) -> int:
        x, y = cell
        if not self.in_bounds(cell):
            raise IndexError(f"cell {cell} outside {self.width}x{self.height} grid")
        return self._rows[y][x]

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """Costs as nested tuples, [row][col]."""
        return self._rows

    @property
    def array(self) -> np.ndarray:
        """Read-only [row][col] view, handy for plotting."""
        return self._arr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"CostGrid({self.width}x{self.height})"

    def __str__(self) -> str:
        return "\n".join("".join(str(v) if v < 10 else f"[{v}]" for v in row) for row in self._rows)


def _validated_array(rows: GridLike) -> np.ndarray:
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2 or rows.size == 0:
            raise MalformedGridError(f"expected a non-empty 2-D array, got shape {rows.shape}")
        if rows.dtype == np.bool_ or not np.issubdtype(rows.dtype, np.integer):
            raise MalformedGridError(f"grid costs must be integers, got dtype {rows.dtype}")
        if (rows < 0).any():
            raise MalformedGridError("grid costs must be >= 0")
        return np.array(rows, dtype=np.int64, copy=True)

    if isinstance(rows, (str, bytes)):
        raise MalformedGridError("use CostGrid.from_text() for textual grids")

    try:
        rows = [list(r) for r in rows]
    except TypeError:
        raise MalformedGridError("grid must be a sequence of rows") from None
    if not rows or not rows[0]:
        raise MalformedGridError("grid must be at least 1x1")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedGridError(f"row {y} has {len(row)} cells, expected {width}")
        for x, v in enumerate(row):
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
                raise MalformedGridError(f"non-integer cost {v!r} at (col={x}, row={y})")
            if v < 0:
                raise MalformedGridError(f"negative cost {v} at (col={x}, row={y})")
    return np.array(rows, dtype=np.int64)
