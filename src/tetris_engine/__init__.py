"""Falling-block puzzle engine with pure commands and a thin host layer."""

from .board import Board
from .tetromino import Tetromino, TetrominoType, rotate_matrix
from .game_state import GameState, GameStatus
from .engine import Engine
from .randomizer import RandomPieceSource, SequencePieceSource
from .scoring import LINE_CLEAR_POINTS, level_for_lines, score_for_lines
from .utils import can_move, gravity_interval_ms, render_grid
from .host import GameHost, GravityTimer
from .highscore import HighScoreStore

__all__ = [
    "Board",
    "Tetromino",
    "TetrominoType",
    "GameState",
    "GameStatus",
    "Engine",
    "RandomPieceSource",
    "SequencePieceSource",
    "LINE_CLEAR_POINTS",
    "GameHost",
    "GravityTimer",
    "HighScoreStore",
    "can_move",
    "gravity_interval_ms",
    "level_for_lines",
    "render_grid",
    "rotate_matrix",
    "score_for_lines",
]
