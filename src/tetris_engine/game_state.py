"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .board import Board
from .tetromino import BASE_SHAPES, SHAPE_COLORS, Shape, Tetromino, TetrominoType


class GameStatus(str, Enum):
    """Lifecycle of a session."""

    NOT_STARTED = "not-started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game-over"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a Tetris session.

    Commands in :mod:`tetris_engine.commands` take a state and return a new
    one; nothing mutates a state in place.  A freshly constructed state is the
    pre-start state: an empty board, no pieces and ``NOT_STARTED``.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    upcoming: Optional[TetrominoType] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    status: GameStatus = GameStatus.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def next_shape(self) -> Optional[Shape]:
        """Canonical shape of the upcoming piece, for preview panels."""

        return BASE_SHAPES[self.upcoming] if self.upcoming is not None else None

    @property
    def next_color(self) -> Optional[str]:
        return SHAPE_COLORS[self.upcoming] if self.upcoming is not None else None

    def evolve(self, **changes) -> "GameState":
        """Return a copy of the state with ``changes`` applied."""

        return replace(self, **changes)
