"""Pure game commands.

Every command takes a :class:`~tetris_engine.game_state.GameState` and returns
the next one.  A command that is rejected (blocked move, failed rotation, or
any command issued while the game is not running) returns the input state
object unchanged.  Commands that may lock a piece also take a piece source
used to draw the new upcoming piece.
"""

from __future__ import annotations

import logging

from .board import WIDTH, Board
from .game_state import GameState, GameStatus
from .randomizer import PieceSource
from .scoring import apply_clear
from .tetromino import BASE_SHAPES, Position, Shape, Tetromino, TetrominoType, shape_width
from .utils import can_move


LOGGER = logging.getLogger(__name__)

# Horizontal offsets tried, in order, when a rotation collides in place.  The
# same table applies to every piece, I and O included.
WALL_KICKS: tuple[int, ...] = (-1, 1, -2, 2)


def spawn_position(shape: Shape) -> Position:
    """Return the top-centre spawn ``(row, col)`` for ``shape``."""

    return 0, WIDTH // 2 - shape_width(shape) // 2


def spawn_piece(kind: TetrominoType) -> Tetromino:
    return Tetromino.spawn(kind, spawn_position(BASE_SHAPES[kind]))


def start(draw: PieceSource) -> GameState:
    """Begin a new session: empty board, two fresh pieces, counters reset."""

    active = spawn_piece(draw())
    upcoming = draw()
    LOGGER.info("Game started with %s (next %s)", active.kind.value, upcoming.value)
    return GameState(
        board=Board(),
        active=active,
        upcoming=upcoming,
        score=0,
        level=1,
        lines=0,
        status=GameStatus.RUNNING,
    )


def tick(state: GameState, draw: PieceSource) -> GameState:
    """Apply one step of gravity, locking the piece if it cannot descend."""

    if not state.running or state.active is None:
        return state
    if can_move(state.board, state.active, 0, 1):
        return state.evolve(active=state.active.moved(0, 1))
    return lock(state, state.active, draw)


def move_horizontal(state: GameState, direction: int) -> GameState:
    """Shift the active piece one column left (``-1``) or right (``+1``)."""

    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")
    if not state.running or state.active is None:
        return state
    if not can_move(state.board, state.active, direction, 0):
        return state
    return state.evolve(active=state.active.moved(direction, 0))


def hard_drop(state: GameState, draw: PieceSource) -> GameState:
    """Drop the active piece to the lowest legal row and lock it."""

    if not state.running or state.active is None:
        return state
    piece = state.active
    while can_move(state.board, piece, 0, 1):
        piece = piece.moved(0, 1)
    return lock(state, piece, draw)


def rotate(state: GameState) -> GameState:
    """Rotate the active piece clockwise, trying wall kicks if needed."""

    if not state.running or state.active is None:
        return state
    rotated = state.active.rotated()
    for offset in (0,) + WALL_KICKS:
        candidate = rotated.moved(offset, 0)
        if can_move(state.board, candidate, 0, 0):
            return state.evolve(active=candidate)
    return state


def toggle_pause(state: GameState) -> GameState:
    """Switch between running and paused; inert before start and after game over."""

    if state.status is GameStatus.RUNNING:
        LOGGER.info("Paused")
        return state.evolve(status=GameStatus.PAUSED)
    if state.status is GameStatus.PAUSED:
        LOGGER.info("Resumed")
        return state.evolve(status=GameStatus.RUNNING)
    return state


def lock(state: GameState, piece: Tetromino, draw: PieceSource) -> GameState:
    """Write ``piece`` into the board, clear rows, score, then spawn."""

    board = state.board.lock_piece(piece)
    board, cleared = board.clear_full_rows()
    result = apply_clear(state.score, state.lines, state.level, cleared)
    LOGGER.debug("Locked %s at %s", piece.kind.value, piece.position)
    if cleared:
        LOGGER.debug("Cleared %d row(s) for %d points. Score: %d", cleared, result.points, result.score)
    if result.level > state.level:
        LOGGER.info("Level up: %d -> %d", state.level, result.level)
    locked = state.evolve(
        board=board,
        active=None,
        score=result.score,
        lines=result.lines,
        level=result.level,
    )
    return spawn(locked, draw)


def spawn(state: GameState, draw: PieceSource) -> GameState:
    """Promote the upcoming piece to active and draw a new upcoming piece.

    If the new piece collides at its spawn position the session ends.
    """

    kind = state.upcoming or draw()
    active = spawn_piece(kind)
    upcoming = draw()
    if not can_move(state.board, active, 0, 0):
        LOGGER.info("Game over. Final score: %d", state.score)
        return state.evolve(active=active, upcoming=upcoming, status=GameStatus.GAME_OVER)
    LOGGER.debug("Spawned %s (next %s)", kind.value, upcoming.value)
    return state.evolve(active=active, upcoming=upcoming)
