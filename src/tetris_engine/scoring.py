"""Line-clear scoring and level progression."""

from __future__ import annotations

from dataclasses import dataclass

# Points awarded for clearing 0..4 rows with a single lock, before the level
# multiplier is applied.
LINE_CLEAR_POINTS: tuple[int, int, int, int, int] = (0, 40, 100, 300, 1200)
LINES_PER_LEVEL = 10


def score_for_lines(lines: int, level: int) -> int:
    """Return the points for clearing ``lines`` rows at ``level``."""

    if lines <= 0:
        return 0
    return LINE_CLEAR_POINTS[min(lines, len(LINE_CLEAR_POINTS) - 1)] * level


def level_for_lines(total_lines: int) -> int:
    """Return the level reached after ``total_lines`` cleared rows."""

    return total_lines // LINES_PER_LEVEL + 1


@dataclass(frozen=True)
class ClearResult:
    """Outcome of one lock: rows removed and the updated counters."""

    cleared: int
    points: int
    score: int
    lines: int
    level: int


def apply_clear(score: int, lines: int, level: int, cleared: int) -> ClearResult:
    """Fold ``cleared`` rows into the running ``score``/``lines``/``level``.

    The level multiplier is the level *before* the rows are counted.  The
    level never decreases, even if the counters passed in are inconsistent.
    """

    points = score_for_lines(cleared, level)
    total = lines + cleared
    return ClearResult(
        cleared=cleared,
        points=points,
        score=score + points,
        lines=total,
        level=max(level, level_for_lines(total)),
    )
