"""Tetromino definitions and rotation.

Each piece kind has a canonical shape stored as an ``N x N`` binary matrix
(``N`` is 4 for ``I``, 2 for ``O`` and 3 for the rest) and a fixed colour.
Shapes are kept as tuples of tuples so they are immutable, hashable and can be
compared bit-for-bit.  Rotation is always recomputed from the current matrix;
there is no separate orientation index that could drift out of sync.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Tuple

Shape = Tuple[Tuple[int, ...], ...]
Position = Tuple[int, int]  # (row, col) of the matrix's top-left corner


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.O: (
        (1, 1),
        (1, 1),
    ),
    TetrominoType.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    TetrominoType.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
}

SHAPE_COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00F0F0",
    TetrominoType.J: "#0000F0",
    TetrominoType.L: "#F0A000",
    TetrominoType.O: "#F0F000",
    TetrominoType.S: "#00F000",
    TetrominoType.T: "#A000F0",
    TetrominoType.Z: "#F00000",
}


def rotate_matrix(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    For an ``N x N`` matrix the result satisfies
    ``rotated[x][N - 1 - y] == shape[y][x]``.  Applying the rotation four
    times yields the original matrix.
    """

    size = len(shape)
    rotated = [[0] * size for _ in range(size)]
    for y in range(size):
        for x in range(size):
            rotated[x][size - 1 - y] = shape[y][x]
    return tuple(tuple(row) for row in rotated)


def filled_cells(shape: Shape) -> Iterator[Tuple[int, int]]:
    """Yield the ``(row, col)`` offsets of every filled cell in ``shape``."""

    for r, row in enumerate(shape):
        for c, value in enumerate(row):
            if value:
                yield r, c


def shape_width(shape: Shape) -> int:
    """Width of the shape matrix (not of its filled footprint)."""

    return len(shape[0]) if shape else 0


@dataclass(frozen=True)
class Tetromino:
    """Active falling piece in the game."""

    kind: TetrominoType
    shape: Shape
    position: Position = (0, 0)  # (row, col)

    @classmethod
    def spawn(cls, kind: TetrominoType, position: Position = (0, 0)) -> "Tetromino":
        """Create a piece of ``kind`` in its canonical orientation."""

        return cls(kind=kind, shape=BASE_SHAPES[kind], position=position)

    @property
    def color(self) -> str:
        return SHAPE_COLORS[self.kind]

    def moved(self, dx: int, dy: int) -> "Tetromino":
        """Return a copy translated by ``dx`` columns and ``dy`` rows."""

        row, col = self.position
        return replace(self, position=(row + dy, col + dx))

    def rotated(self) -> "Tetromino":
        """Return a copy with the shape rotated clockwise in place."""

        return replace(self, shape=rotate_matrix(self.shape))

    def blocks(self) -> list[Tuple[int, int]]:
        """Return the board coordinates of the filled cells."""

        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in filled_cells(self.shape)]
