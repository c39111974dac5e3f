import logging

import pytest

from tetris_engine import commands
from tetris_engine.__main__ import format_frame, parse_args, run_demo
from tetris_engine.board import HEIGHT
from tetris_engine.config import HostConfig
from tetris_engine.randomizer import SequencePieceSource


def test_format_frame_overlays_active_piece():
    state = commands.start(SequencePieceSource("OI"))
    lines = format_frame(state).splitlines()
    assert len(lines) == HEIGHT + 1
    assert lines[0] == "....##...."
    assert lines[1] == "....##...."
    assert lines[-1] == "score=0 level=1 lines=0 next=I status=running"


def test_run_demo_prints_frames_and_logs(capsys, caplog, tmp_path):
    config = HostConfig(seed=7, frames=5, high_score_path=tmp_path / "hs.json")
    with caplog.at_level(logging.INFO, logger="tetris_engine.__main__"):
        state = run_demo(config)
    out = capsys.readouterr().out
    assert out.count("score=") == 5
    assert state.score >= 0
    assert "Demo finished" in "".join(caplog.messages)


def test_parse_args_builds_config(tmp_path):
    config = parse_args(["--seed", "3", "--frames", "2", "--high-score-file", str(tmp_path / "x.json")])
    assert config.seed == 3
    assert config.frames == 2
    assert config.high_score_path == tmp_path / "x.json"
    assert config.use_pygame is False


def test_parse_args_defaults_come_from_host_config():
    config = parse_args([])
    defaults = HostConfig()
    assert config.frames == defaults.frames
    assert config.cell_size == defaults.cell_size
    assert config.fps == defaults.fps
    assert config.log_level == defaults.log_level
    assert config.high_score_path == defaults.high_score_path


def test_log_level_is_validated():
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "loud"])
