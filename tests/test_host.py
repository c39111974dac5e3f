import pytest

from tetris_engine import Engine, GameHost, HighScoreStore, SequencePieceSource
from tetris_engine.board import HEIGHT, WIDTH, Board
from tetris_engine.game_state import GameStatus
from tetris_engine.tetromino import BASE_SHAPES, TetrominoType, rotate_matrix


def test_update_applies_gravity_from_elapsed_time():
    host = GameHost(source=SequencePieceSource("T"))
    host.start()
    host.update(999)
    assert host.state.active.position == (0, 4)
    host.update(2001)
    assert host.state.active.position == (3, 4)


def test_no_gravity_while_paused():
    host = GameHost(source=SequencePieceSource("T"))
    host.start()
    host.dispatch("pause")
    host.update(5000)
    assert host.state.status is GameStatus.PAUSED
    assert host.state.active.position == (0, 4)
    assert host.timer.accum == 0


def test_dispatch_routes_actions():
    host = GameHost(source=SequencePieceSource("T"))
    host.start()
    assert host.dispatch("left").active.position == (0, 3)
    assert host.dispatch("right").active.position == (0, 4)
    assert host.dispatch("down").active.position == (1, 4)
    rotated = host.dispatch("rotate")
    assert rotated.active.shape == rotate_matrix(BASE_SHAPES[TetrominoType.T])
    dropped = host.dispatch("drop")
    assert dropped.active.position == (0, 4)
    assert dropped.board != Board()
    with pytest.raises(ValueError):
        host.dispatch("jump")


def test_level_up_rearms_timer():
    host = GameHost(source=SequencePieceSource("I"))
    host.start()
    cells = [(r, c) for r in range(HEIGHT - 4, HEIGHT) for c in range(1, WIDTH)]
    host.engine._state = host.state.evolve(board=Board().with_cells(cells, 1), lines=8)
    host.timer.advance(600)
    host.dispatch("rotate")
    for _ in range(5):
        host.dispatch("left")
    host.dispatch("drop")
    assert host.state.level == 2
    assert host.timer.interval_ms == 950
    assert host.timer.accum == 0


def test_restart_rearms_timer_at_level_one():
    host = GameHost(source=SequencePieceSource("T"))
    host.start()
    host.timer.reset(5)
    host.dispatch("restart")
    assert host.timer.interval_ms == 1000
    assert host.state.score == 0


def test_game_over_updates_high_score(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    store.submit(0)
    host = GameHost(store=store, source=SequencePieceSource("O"))
    host.start()
    host.engine._state = host.state.evolve(score=250)
    for _ in range(20):
        host.dispatch("drop")
    assert host.state.over
    assert host.final_score == 250
    assert host.high_score == 250
    assert store.load() == 250
    # Gravity stops once the game is over.
    assert host.update(10_000) is host.state


def test_game_over_listener_on_injected_engine_is_kept(tmp_path):
    seen = []
    engine = Engine(SequencePieceSource("O"), on_game_over=seen.append)
    host = GameHost(engine=engine, store=HighScoreStore(tmp_path / "scores.json"))
    host.start()
    for _ in range(20):
        host.dispatch("drop")
    assert host.state.over
    assert seen == [host.final_score]


def test_level_listener_on_injected_engine_is_kept():
    levels = []
    host = GameHost(engine=Engine(SequencePieceSource("I"), on_level_change=levels.append))
    host.start()
    cells = [(r, c) for r in range(HEIGHT - 4, HEIGHT) for c in range(1, WIDTH)]
    host.engine._state = host.state.evolve(board=Board().with_cells(cells, 1), lines=8)
    host.dispatch("rotate")
    for _ in range(5):
        host.dispatch("left")
    host.dispatch("drop")
    assert levels == [2]
    assert host.timer.interval_ms == 950


def test_restart_after_game_over_begins_a_fresh_session():
    host = GameHost(source=SequencePieceSource("O"))
    host.start()
    host.engine._state = host.state.evolve(score=120, lines=14, level=2)
    for _ in range(20):
        host.dispatch("drop")
    assert host.state.over
    assert host.final_score == 120
    assert host.update(5000).over

    state = host.dispatch("restart")
    assert state.status is GameStatus.RUNNING
    assert state.board == Board()
    assert (state.score, state.level, state.lines) == (0, 1, 0)
    assert host.final_score is None
    assert host.timer.interval_ms == 1000
    assert host.timer.accum == 0
    host.update(1000)
    assert host.state.active.position == (1, 4)
