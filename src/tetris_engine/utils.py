"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import COLOR_CODES, Board
from .tetromino import Tetromino


BASE_GRAVITY_MS = 1000
MIN_GRAVITY_MS = 300
GRAVITY_STEP_MS = 50


def gravity_interval_ms(level: int) -> int:
    """Return the fall interval in milliseconds for ``level``.

    Each level shaves a fixed step off the base interval until the floor of
    ``MIN_GRAVITY_MS`` is reached.
    """

    return max(MIN_GRAVITY_MS, BASE_GRAVITY_MS - (max(level, 1) - 1) * GRAVITY_STEP_MS)


def can_move(board: Board, tetromino: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``tetromino`` can move by ``dx`` and ``dy`` on ``board``.

    ``dx`` shifts columns and ``dy`` shifts rows.  With both offsets at zero
    this simply reports whether the piece's current placement is legal.
    """

    row, col = tetromino.position
    return not board.collides(tetromino.shape, (row + dy, col + dx))


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells occupied by the active piece receive the colour code of the
    piece.
    """

    grid = board.to_rows()
    if active is not None:
        value = COLOR_CODES[active.color]
        for r, c in active.blocks():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = value
    return grid
