import random

import numpy as np
import pytest

from tetris_engine.board import CELL_COLORS, COLOR_CODES, HEIGHT, WIDTH, Board
from tetris_engine.tetromino import BASE_SHAPES, Tetromino, TetrominoType, filled_cells


def random_board(rng: random.Random, density: float = 0.4) -> Board:
    rows = [[1 if rng.random() < density else 0 for _ in range(WIDTH)] for _ in range(HEIGHT)]
    return Board.from_rows(rows)


def test_board_cells_are_bounds_checked():
    board = Board()
    assert board.get_cell(0, 0) == 0
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.with_cells([(0, WIDTH)], 1)
    assert not board.is_empty(-1, 0)


def test_board_is_immutable():
    board = Board()
    updated = board.with_cells([(5, 5)], 3)
    assert board.get_cell(5, 5) == 0
    assert updated.get_cell(5, 5) == 3
    with pytest.raises(ValueError):
        board.grid[0, 0] = 1


@pytest.mark.parametrize("seed", range(5))
def test_out_of_bounds_always_collides(seed):
    rng = random.Random(seed)
    board = random_board(rng)
    for kind, shape in BASE_SHAPES.items():
        cells = list(filled_cells(shape))
        min_c = min(c for _, c in cells)
        max_c = max(c for _, c in cells)
        max_r = max(r for r, _ in cells)
        row = rng.randrange(0, HEIGHT - max_r)
        assert board.collides(shape, (row, -1 - min_c))
        assert board.collides(shape, (row, WIDTH - max_c))
        assert board.collides(shape, (HEIGHT - max_r, 0))


def test_headroom_above_the_board_does_not_collide():
    board = Board()
    # Only the second matrix row of the I piece is filled.
    assert not board.collides(BASE_SHAPES[TetrominoType.I], (-1, 3))
    assert not board.collides(BASE_SHAPES[TetrominoType.O], (-1, 0))


def test_occupied_cell_collides():
    board = Board().with_cells([(1, 5)], 1)
    assert board.collides(BASE_SHAPES[TetrominoType.T], (0, 4))
    assert not board.collides(BASE_SHAPES[TetrominoType.T], (2, 4))


def test_lock_writes_colour_codes_and_clips():
    piece = Tetromino.spawn(TetrominoType.O, (-1, 0))
    board = Board().lock_piece(piece)
    code = COLOR_CODES[piece.color]
    assert CELL_COLORS[code] == piece.color
    assert board.get_cell(0, 0) == code
    assert board.get_cell(0, 1) == code
    assert int(np.count_nonzero(board.grid)) == 2


def test_clear_keeps_order_of_remaining_rows():
    rows = [[0] * WIDTH for _ in range(HEIGHT)]
    full = [1] * WIDTH
    for r in (19, 17, 10):
        rows[r] = list(full)
    for r in (18, 16, 9, 0):
        rows[r] = [r % 7 + 1] + [0] * (WIDTH - 1)
    board, cleared = Board.from_rows(rows).clear_full_rows()

    survivors = [row for row in rows if not all(row)]
    expected = [[0] * WIDTH for _ in range(3)] + survivors
    assert cleared == 3
    assert board.to_rows() == expected
    assert not board.full_rows().any()


@pytest.mark.parametrize("seed", range(5))
def test_clear_matches_row_by_row_removal(seed):
    rng = random.Random(seed)
    rows = random_board(rng, density=0.5).to_rows()
    for r in rng.sample(range(HEIGHT), 4):
        rows[r] = [2] * WIDTH

    # Bottom-up scan that re-checks the same index after each removal.
    expected = [list(row) for row in rows]
    r = HEIGHT - 1
    while r >= 0:
        if all(expected[r]):
            del expected[r]
            expected.insert(0, [0] * WIDTH)
        else:
            r -= 1

    board, cleared = Board.from_rows(rows).clear_full_rows()
    assert cleared == sum(1 for row in rows if all(row))
    assert cleared >= 4
    assert board.to_rows() == expected


def test_clear_without_full_rows_returns_same_board():
    board = Board().with_cells([(19, 0)], 1)
    cleared_board, cleared = board.clear_full_rows()
    assert cleared == 0
    assert cleared_board is board


@pytest.mark.parametrize("seed", range(3))
def test_single_cell_collision_matches_cell_occupancy(seed):
    board = random_board(random.Random(seed))
    dot = ((1,),)
    for row in range(HEIGHT):
        for col in range(WIDTH):
            assert board.collides(dot, (row, col)) is (not board.is_empty(row, col))
