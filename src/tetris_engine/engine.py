"""Mutable owner of the current game state.

:class:`Engine` holds the only mutable reference to a
:class:`~tetris_engine.game_state.GameState` and exposes the pure commands as
methods.  It is not thread-safe: hosts that dispatch from several threads
must serialise calls themselves.
"""

from __future__ import annotations

from typing import Callable, Optional

from . import commands
from .game_state import GameState
from .randomizer import PieceSource, RandomPieceSource


LevelListener = Callable[[int], None]
GameOverListener = Callable[[int], None]


class Engine:
    """Command surface for hosts and front-ends.

    Parameters
    ----------
    source:
        Piece source used whenever a new piece is drawn.  Defaults to a
        uniform :class:`RandomPieceSource`.
    on_level_change:
        Called with the new level whenever a command raises the level, so the
        host can re-arm its gravity timer.
    on_game_over:
        Called with the final score when a session ends.
    """

    def __init__(
        self,
        source: Optional[PieceSource] = None,
        *,
        on_level_change: Optional[LevelListener] = None,
        on_game_over: Optional[GameOverListener] = None,
    ) -> None:
        self._draw: PieceSource = source or RandomPieceSource()
        self._state = GameState()
        self.on_level_change = on_level_change
        self.on_game_over = on_game_over

    @property
    def state(self) -> GameState:
        return self._state

    def snapshot(self) -> GameState:
        """Return the current immutable state."""

        return self._state

    # Commands ---------------------------------------------------------
    def start(self) -> GameState:
        return self._apply(commands.start(self._draw))

    def tick(self) -> GameState:
        return self._apply(commands.tick(self._state, self._draw))

    def move_horizontal(self, direction: int) -> GameState:
        return self._apply(commands.move_horizontal(self._state, direction))

    def hard_drop(self) -> GameState:
        return self._apply(commands.hard_drop(self._state, self._draw))

    def rotate(self) -> GameState:
        return self._apply(commands.rotate(self._state))

    def toggle_pause(self) -> GameState:
        return self._apply(commands.toggle_pause(self._state))

    # Internal helpers -------------------------------------------------
    def _apply(self, new_state: GameState) -> GameState:
        previous, self._state = self._state, new_state
        if new_state is previous:
            return new_state
        if new_state.level != previous.level and self.on_level_change is not None:
            self.on_level_change(new_state.level)
        if new_state.over and not previous.over and self.on_game_over is not None:
            self.on_game_over(new_state.score)
        return new_state
