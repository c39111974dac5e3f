"""Host-side settings.

The engine itself has no tunables: board size, scoring and gravity are fixed
constants.  Everything a front-end may want to adjust lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def default_high_score_path() -> Path:
    return Path.home() / ".tetris_engine" / "highscore.json"


@dataclass
class HostConfig:
    """Settings shared by the ASCII and pygame front-ends."""

    # Size of a single board cell in pixels
    cell_size: int = 30
    # Frames per second to run the pygame loop at
    fps: int = 60
    # Seed for the piece source; ``None`` picks a fresh one per run
    seed: Optional[int] = None
    high_score_path: Path = field(default_factory=default_high_score_path)
    log_level: str = "INFO"
    # Number of frames the ASCII demo prints before stopping
    frames: int = 40
    # Open the pygame window instead of printing ASCII frames
    use_pygame: bool = False
