"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import SHAPE_COLORS, Position, Shape, Tetromino, filled_cells


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

EMPTY = 0

Grid = NDArray[np.uint8]

# The grid stores colour codes rather than piece kinds: once locked, a cell only
# remembers how to be drawn.  ``0`` is reserved for empty cells.
CELL_COLORS: Dict[int, Optional[str]] = {EMPTY: None}
COLOR_CODES: Dict[str, int] = {}
for _code, _color in enumerate(dict.fromkeys(SHAPE_COLORS.values()), start=1):
    CELL_COLORS[_code] = _color
    COLOR_CODES[_color] = _code


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


def _freeze(grid: Grid) -> Grid:
    grid.flags.writeable = False
    return grid


class Board:
    """Immutable Tetris board holding the locked cells.

    Every operation that changes the contents returns a new :class:`Board`;
    the underlying array is marked read-only so a board can be shared freely
    between game states.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = create_empty_grid()
        elif grid.shape != (HEIGHT, WIDTH):
            raise ValueError(f"Board grid must be {HEIGHT}x{WIDTH}, got {grid.shape}")
        self.grid: Grid = _freeze(np.array(grid, dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from a nested sequence of colour codes."""

        return cls(np.asarray(rows, dtype=np.uint8))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())

    def __repr__(self) -> str:
        return f"Board(filled={int(np.count_nonzero(self.grid))})"

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def with_cells(self, cells: Iterable[Tuple[int, int]], value: int) -> "Board":
        """Return a copy with every ``(row, col)`` in ``cells`` set to ``value``.

        Raises:
            IndexError: If any of the coordinates are outside the board.
        """
        grid = self.grid.copy()
        for row, col in cells:
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise IndexError("Cell out of bounds")
            grid[row, col] = np.uint8(value)
        return Board(grid)

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == EMPTY)
        return False

    def collides(self, shape: Shape, position: Position) -> bool:
        """Return ``True`` if ``shape`` placed at ``position`` is illegal.

        A filled cell collides when it falls outside the side walls, at or
        below the floor, or on an occupied cell.  Cells above row ``0`` are
        never treated as colliding so a shape's empty headroom, or a part of
        it still above the visible field, does not block placement.
        """

        top, left = position
        for dr, dc in filled_cells(shape):
            row = top + dr
            col = left + dc
            if col < 0 or col >= self.width or row >= self.height:
                return True
            if row >= 0 and not self.is_empty(row, col):
                return True
        return False

    def lock_piece(self, tetromino: Tetromino) -> "Board":
        """Return a board with the tetromino's blocks written into the grid.

        Blocks outside the board are dropped.
        """

        grid = self.grid.copy()
        value = np.uint8(COLOR_CODES[tetromino.color])
        for row, col in tetromino.blocks():
            if 0 <= row < self.height and 0 <= col < self.width:
                grid[row, col] = value
        return Board(grid)

    def full_rows(self) -> NDArray[np.bool_]:
        """Boolean mask of the rows with no empty cell."""

        return np.all(self.grid != EMPTY, axis=1)

    def clear_full_rows(self) -> Tuple["Board", int]:
        """Remove completed rows.

        Returns the resulting board and how many rows were removed.  The
        surviving rows keep their relative order and the same number of empty
        rows is inserted at the top.
        """

        full_rows = self.full_rows()
        cleared = int(np.count_nonzero(full_rows))
        if not cleared:
            return self, 0
        remaining = self.grid[~full_rows]
        new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
        return Board(np.vstack((new_rows, remaining))), cleared

    def to_rows(self) -> list[list[int]]:
        """Return the grid as a plain nested list."""

        return self.grid.tolist()
