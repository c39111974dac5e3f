"""Glue between the engine and a front-end.

:class:`GameHost` is what a renderer drives: it owns the :class:`Engine`,
turns elapsed time into gravity ticks, maps named user actions onto engine
commands and keeps the high score.  It does no drawing and no event polling,
so the same host backs the ASCII demo and the pygame window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .engine import Engine
from .game_state import GameState
from .highscore import HighScoreStore
from .randomizer import PieceSource
from .utils import gravity_interval_ms


LOGGER = logging.getLogger(__name__)

ACTIONS = ("left", "right", "rotate", "down", "drop", "pause", "restart")


@dataclass
class GravityTimer:
    """Accumulate elapsed time and report how many gravity ticks are due.

    The interval is only recomputed through :meth:`reset`, which the host
    calls when a session starts and whenever the level changes.
    """

    interval_ms: float = gravity_interval_ms(1)
    accum: float = 0.0

    def reset(self, level: int) -> None:
        self.interval_ms = gravity_interval_ms(level)
        self.accum = 0.0

    def advance(self, dt_ms: float) -> int:
        """Add ``dt_ms`` and return the number of whole intervals elapsed."""

        self.accum += max(0.0, dt_ms)
        due = int(self.accum // self.interval_ms)
        self.accum -= due * self.interval_ms
        return due


class GameHost:
    """Manage a game session on behalf of a front-end."""

    def __init__(
        self,
        engine: Optional[Engine] = None,
        store: Optional[HighScoreStore] = None,
        *,
        source: Optional[PieceSource] = None,
    ) -> None:
        self.engine = engine or Engine(source)
        # Listeners already set on an injected engine keep being called.
        self._level_listener = self.engine.on_level_change
        self._game_over_listener = self.engine.on_game_over
        self.engine.on_level_change = self._on_level_change
        self.engine.on_game_over = self._on_game_over
        self.timer = GravityTimer()
        self.store = store
        self.high_score = store.load() if store is not None else 0
        self.final_score: Optional[int] = None

    @property
    def state(self) -> GameState:
        return self.engine.state

    def start(self) -> GameState:
        """Start (or restart) a session and arm the gravity timer."""

        self.final_score = None
        state = self.engine.start()
        self.timer.reset(state.level)
        return state

    def update(self, dt_ms: float) -> GameState:
        """Advance gravity by ``dt_ms`` milliseconds of wall-clock time.

        Gravity does not accumulate while the game is paused or over.
        """

        if not self.engine.state.running:
            return self.engine.state
        level = self.engine.state.level
        for _ in range(self.timer.advance(dt_ms)):
            state = self.engine.tick()
            # The timer was re-armed on level change; drop the stale backlog.
            if not state.running or state.level != level:
                break
        return self.engine.state

    def dispatch(self, action: str) -> GameState:
        """Route a named user action to the engine.

        Raises:
            ValueError: If ``action`` is not one of :data:`ACTIONS`.
        """

        if action == "left":
            return self.engine.move_horizontal(-1)
        if action == "right":
            return self.engine.move_horizontal(1)
        if action == "rotate":
            return self.engine.rotate()
        if action == "down":
            return self.engine.tick()
        if action == "drop":
            return self.engine.hard_drop()
        if action == "pause":
            return self.engine.toggle_pause()
        if action == "restart":
            return self.start()
        raise ValueError(f"Unknown action: {action}")

    # Engine callbacks -------------------------------------------------
    def _on_level_change(self, level: int) -> None:
        self.timer.reset(level)
        LOGGER.debug("Gravity interval now %sms at level %d", self.timer.interval_ms, level)
        if self._level_listener is not None:
            self._level_listener(level)

    def _on_game_over(self, score: int) -> None:
        self.final_score = score
        if self.store is not None and self.store.submit(score):
            self.high_score = score
        else:
            self.high_score = max(self.high_score, score)
        if self._game_over_listener is not None:
            self._game_over_listener(score)
