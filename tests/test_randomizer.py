import pytest

from tetris_engine.randomizer import RandomPieceSource, SequencePieceSource
from tetris_engine.tetromino import TetrominoType


def test_seeded_source_is_reproducible():
    first = RandomPieceSource(seed=42)
    second = RandomPieceSource(seed=42)
    assert [first() for _ in range(50)] == [second() for _ in range(50)]


def test_random_source_covers_all_kinds():
    source = RandomPieceSource(seed=1)
    assert {source() for _ in range(500)} == set(TetrominoType)


def test_sequence_source_repeats_by_default():
    source = SequencePieceSource(["I", TetrominoType.O])
    assert [source() for _ in range(4)] == [
        TetrominoType.I,
        TetrominoType.O,
        TetrominoType.I,
        TetrominoType.O,
    ]


def test_finite_sequence_is_exhausted():
    source = SequencePieceSource("T", repeat=False)
    assert source() is TetrominoType.T
    with pytest.raises(StopIteration):
        source()


def test_sequence_source_needs_kinds():
    with pytest.raises(ValueError):
        SequencePieceSource([])
