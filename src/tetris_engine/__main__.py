"""Simple ASCII demo for the Tetris engine.

Run with: `python -m tetris_engine`

By default this plays a short seeded game with random inputs and prints each
frame (board plus the active tetromino) to stdout, which makes a handy smoke
test without a display.  Pass ``--pygame`` to open the pygame window instead.
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Optional, Sequence

from .config import HostConfig
from .game_state import GameState
from .host import ACTIONS, GameHost
from .randomizer import RandomPieceSource
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

# Inputs the demo picks from; pause and restart would only stall the replay.
DEMO_ACTIONS = tuple(a for a in ACTIONS if a not in ("pause", "restart"))


def format_frame(state: GameState) -> str:
    grid = render_grid(state.board, state.active)
    lines = ["".join("#" if cell else "." for cell in row) for row in grid]
    lines.append(
        f"score={state.score} level={state.level} lines={state.lines} "
        f"next={state.upcoming.value if state.upcoming else '-'} status={state.status.value}"
    )
    return "\n".join(lines)


def run_demo(config: HostConfig) -> GameState:
    """Play ``config.frames`` frames of a seeded game and print them."""

    host = GameHost(source=RandomPieceSource(config.seed))
    inputs = random.Random(config.seed)
    state = host.start()
    for _ in range(config.frames):
        if state.over:
            break
        host.dispatch(inputs.choice(DEMO_ACTIONS))
        state = host.update(host.timer.interval_ms)
        print(format_frame(state))
        print()
    LOGGER.info("Demo finished: score=%d lines=%d", state.score, state.lines)
    return state


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: Optional[Sequence[str]] = None) -> HostConfig:
    defaults = HostConfig()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=defaults.frames, help="Number of frames to print.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for pieces and demo inputs.")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="Cell size in pixels (pygame).")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Frame rate (pygame).")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=defaults.high_score_path,
        help="Where the pygame front-end keeps the high score.",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    parser.add_argument("--pygame", action="store_true", help="Open the pygame window.")
    args = parser.parse_args(argv)
    config = HostConfig(
        cell_size=args.cell_size,
        fps=args.fps,
        seed=args.seed,
        high_score_path=args.high_score_file,
        log_level=args.log_level,
        frames=args.frames,
        use_pygame=args.pygame,
    )
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.log_level), format="%(message)s")
    if config.use_pygame:
        from .run_pygame import main as run_window

        run_window(config)
        return
    run_demo(config)


if __name__ == "__main__":
    main()
