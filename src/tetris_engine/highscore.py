"""Persistent high score for the host layer.

The engine keeps no memory across sessions; the host compares the final score
it reports on game over with the value kept here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union


LOGGER = logging.getLogger(__name__)

HIGH_SCORE_KEY = "tetris_high_score"


class HighScoreStore:
    """Small JSON key/value file holding the best score seen so far."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, object]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        """Return the stored high score, or ``0`` if there is none."""

        value = self._read().get(HIGH_SCORE_KEY, 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            LOGGER.warning("Ignoring malformed high score %r in %s", value, self.path)
            return 0

    def submit(self, score: int) -> bool:
        """Persist ``score`` if it beats the stored value.

        Returns ``True`` when a new high score was written.
        """

        if score <= self.load():
            return False
        data = self._read()
        data[HIGH_SCORE_KEY] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh)
        LOGGER.info("New high score: %d", score)
        return True
