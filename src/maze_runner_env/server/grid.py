# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Grid model for the Maze Runner environment.

Cells are stored in a read-only numpy array indexed ``[row][col]`` (that is,
``[y][x]``). Positions are ``(x, y)`` tuples, and every path in the package
identifies a cell by its canonical index ``y * width + x``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, List, Tuple

try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        "Numpy is not installed. "
        "Please install it following instructions at: "
        "pip install numpy"
    ) from e

Position = Tuple[int, int]


class CellState(IntEnum):
    """Classification of a single maze cell."""

    OPEN = 0
    WALL = 1
    OBSTACLE = 2


class GridModel:
    """
    Immutable maze grid.

    Args:
        cells: 2D array-like of ``CellState`` values, shaped ``(height, width)``.
    """

    def __init__(self, cells):
        array = np.array(cells, dtype=np.int8)
        if array.ndim != 2 or array.size == 0:
            raise ValueError("Grid cells must be a non-empty 2D array")
        if not np.isin(array, [int(s) for s in CellState]).all():
            raise ValueError("Grid cells must be OPEN, WALL or OBSTACLE")
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "GridModel":
        """
        Build a grid from text rows: ``.`` open, ``#`` wall, ``^`` obstacle.

        Example:
            >>> GridModel.from_rows(["..#", "#^."]).cell(1, 1)
            <CellState.OBSTACLE: 2>
        """
        symbols = {".": CellState.OPEN, "#": CellState.WALL, "^": CellState.OBSTACLE}
        return cls([[symbols[ch] for ch in row] for row in rows])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying ``(height, width)`` array."""
        return self._cells

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> CellState:
        """Return the state of cell ``(x, y)``; raises IndexError out of bounds."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return CellState(int(self._cells[y, x]))

    def is_open(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self._cells[y, x] == CellState.OPEN)

    def is_wall(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self._cells[y, x] == CellState.WALL)

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self._cells[y, x] == CellState.OBSTACLE)

    def index_of(self, x: int, y: int) -> int:
        """Canonical index of ``(x, y)``."""
        return y * self.width + x

    def position_of(self, index: int) -> Position:
        """Inverse of ``index_of``."""
        y, x = divmod(index, self.width)
        return x, y

    def obstacles(self) -> Iterator[Position]:
        """Yield every obstacle position in row-major order."""
        for y, x in zip(*np.nonzero(self._cells == CellState.OBSTACLE)):
            yield int(x), int(y)

    def with_cells(self, updates: Iterable[Tuple[Position, CellState]]) -> "GridModel":
        """Return a copy of this grid with the given cells replaced."""
        array = self._cells.copy()
        for (x, y), state in updates:
            array[y, x] = state
        return GridModel(array)

    def to_rows(self) -> List[List[str]]:
        """Cell names row by row, e.g. ``[["OPEN", "WALL"], ...]``."""
        names = {int(s): s.name for s in CellState}
        return [[names[int(v)] for v in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridModel):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"GridModel(width={self.width}, height={self.height})"


def decorate(grid: GridModel, protected: Iterable[Position] = ()) -> GridModel:
    """
    Place obstacles on a grid, returning a new grid.

    Cells are scanned in row-major order. An ``OPEN`` cell becomes an
    ``OBSTACLE`` when neither its row nor its column holds an obstacle yet,
    so the result has at most one obstacle per row and per column.
    Protected cells (the start and end) are never converted and do not
    claim their row or column.
    """
    skip = set(protected)
    used_rows = set()
    used_cols = set()
    placed = []
    for y in range(grid.height):
        for x in range(grid.width):
            if (x, y) in skip or not grid.is_open(x, y):
                continue
            if y in used_rows or x in used_cols:
                continue
            placed.append(((x, y), CellState.OBSTACLE))
            used_rows.add(y)
            used_cols.add(x)
    return grid.with_cells(placed)
