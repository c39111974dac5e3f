"""Piece sources used to pick the next tetromino.

A piece source is any zero-argument callable returning a
:class:`~tetris_engine.tetromino.TetrominoType`.  The engine only relies on
that protocol, so tests can feed a fixed stream of pieces.
"""

from __future__ import annotations

import random
from itertools import cycle
from typing import Callable, Iterable, Iterator, Optional

from .tetromino import TetrominoType

PieceSource = Callable[[], TetrominoType]


class RandomPieceSource:
    """Uniform selection over the seven kinds, optionally seeded."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(seed)
        self._kinds = list(TetrominoType)

    def __call__(self) -> TetrominoType:
        return self._rng.choice(self._kinds)


class SequencePieceSource:
    """Replay a fixed sequence of kinds.

    With ``repeat=True`` (the default) the sequence loops forever; otherwise
    :class:`StopIteration` is raised once it is exhausted.
    """

    def __init__(self, kinds: Iterable[TetrominoType | str], *, repeat: bool = True) -> None:
        items = [TetrominoType(k) for k in kinds]
        if not items:
            raise ValueError("SequencePieceSource needs at least one kind")
        self._iter: Iterator[TetrominoType] = cycle(items) if repeat else iter(items)

    def __call__(self) -> TetrominoType:
        return next(self._iter)
