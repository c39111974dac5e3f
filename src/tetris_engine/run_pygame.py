"""Simple pygame front-end for the Tetris engine.

This module draws a :class:`~tetris_engine.host.GameHost` session with
``pygame`` and forwards keyboard input to it.  All game rules live in the
engine; the window only renders snapshots and feeds elapsed time to the
host's gravity timer.

Controls: arrow keys move, rotate (up) and soft-drop (down); space hard-drops;
``P`` pauses, ``R`` restarts and ``Esc`` quits.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .board import CELL_COLORS, Board
from .config import HostConfig
from .game_state import GameState
from .highscore import HighScoreStore
from .host import GameHost
from .randomizer import RandomPieceSource
from .tetromino import filled_cells
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

# Width in cells of the side panel holding the preview and the counters
PANEL_CELLS = 6
BACKGROUND = (12, 20, 69)
GRID_LINE = (50, 50, 50)
ACCENT = (0, 191, 255)
TEXT = (255, 255, 255)

KEY_ACTIONS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "rotate",
    pygame.K_DOWN: "down",
    pygame.K_SPACE: "drop",
    pygame.K_p: "pause",
    pygame.K_r: "restart",
}


def handle_key(event: pygame.event.Event, host: GameHost) -> GameState:
    """Process keyboard events for piece movement."""

    action = KEY_ACTIONS.get(event.key)
    if action is None:
        return host.state
    return host.dispatch(action)


def draw_board(screen: pygame.Surface, state: GameState, cell_size: int) -> None:
    """Render the locked cells with the active piece overlaid."""

    grid = render_grid(state.board, state.active)
    for r in range(Board.height):
        for c in range(Board.width):
            color = CELL_COLORS.get(grid[r][c])
            rect = pygame.Rect(c * cell_size, r * cell_size, cell_size, cell_size)
            pygame.draw.rect(screen, pygame.Color(color) if color else BACKGROUND, rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_panel(
    screen: pygame.Surface,
    font: pygame.font.Font,
    state: GameState,
    high_score: int,
    cell_size: int,
) -> None:
    """Render the next-piece preview and the counters beside the board."""

    left = Board.width * cell_size + cell_size // 2
    screen.blit(font.render("NEXT", True, ACCENT), (left, cell_size // 2))
    if state.next_shape is not None and state.next_color is not None:
        preview = cell_size // 2
        top = cell_size * 3 // 2
        for r, c in filled_cells(state.next_shape):
            rect = pygame.Rect(left + c * preview, top + r * preview, preview, preview)
            pygame.draw.rect(screen, pygame.Color(state.next_color), rect)

    rows = (
        ("LINES", state.lines),
        ("LEVEL", state.level),
        ("SCORE", state.score),
        ("BEST", high_score),
    )
    y = cell_size * 5
    for label, value in rows:
        screen.blit(font.render(label, True, ACCENT), (left, y))
        screen.blit(font.render(str(value), True, TEXT), (left, y + font.get_linesize()))
        y += font.get_linesize() * 3


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: list[str]) -> None:
    """Dim the window and centre ``lines`` of text on it."""

    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 200))
    screen.blit(shade, (0, 0))
    height = font.get_linesize() * len(lines)
    y = (screen.get_height() - height) // 2
    for line in lines:
        text = font.render(line, True, TEXT)
        screen.blit(text, ((screen.get_width() - text.get_width()) // 2, y))
        y += font.get_linesize()


class GameRunner:
    """Own the pygame window and the game loop."""

    def __init__(self, config: Optional[HostConfig] = None, host: Optional[GameHost] = None) -> None:
        self.config = config or HostConfig()
        self.host = host or GameHost(
            store=HighScoreStore(self.config.high_score_path),
            source=RandomPieceSource(self.config.seed),
        )
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def _draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        state = self.host.state
        size = self.config.cell_size
        screen.fill(BACKGROUND)
        draw_board(screen, state, size)
        draw_panel(screen, font, state, self.host.high_score, size)
        if state.paused:
            draw_overlay(screen, font, ["Paused", "P to resume"])
        elif state.over:
            draw_overlay(
                screen,
                font,
                [
                    "Game Over",
                    f"Score: {state.score}",
                    f"Level: {state.level}",
                    f"Lines: {state.lines}",
                    "R to play again",
                ],
            )
        pygame.display.set_caption(
            f"Tetris - {'Paused - ' if state.paused else ''}Score: {state.score}"
        )
        pygame.display.flip()

    def run(self) -> None:
        """Open the window and play until it is closed."""

        pygame.init()
        size = self.config.cell_size
        screen = pygame.display.set_mode(((Board.width + PANEL_CELLS) * size, Board.height * size))
        font = pygame.font.SysFont(None, max(18, size * 3 // 4))
        clock = pygame.time.Clock()

        self.host.start()
        LOGGER.info("Game started")
        self._running = True
        try:
            while self._running:
                dt = clock.tick(self.config.fps)
                for event in pygame.event.get():
                    self.handle_event(event)
                self.host.update(dt)
                self._draw(screen, font)
        finally:
            pygame.quit()
            LOGGER.info("Game stopped")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Quit on window close or Esc; forward other keys to the host."""

        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.stop()
            else:
                handle_key(event, self.host)

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main(config: Optional[HostConfig] = None) -> None:
    GameRunner(config).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    main()
