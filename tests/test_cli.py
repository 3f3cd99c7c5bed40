"""Tests for the command-line entry point."""
import pytest

from poker_hand_sim import cli
from poker_hand_sim.config import SIM_BLOCK_SIZE, SIM_TRIALS_DEFAULT
from poker_hand_sim.engine.errors import ExhaustedDeck


def test_defaults_come_from_config():
    args = cli.build_parser().parse_args([])
    assert args.trials == SIM_TRIALS_DEFAULT
    assert args.block_size == SIM_BLOCK_SIZE
    assert args.workers == 1
    assert args.seed is None
    assert not args.check


@pytest.mark.parametrize("value", ["0", "-3", "abc", "1.5"])
def test_trials_must_be_positive_integer(value):
    with pytest.raises(SystemExit) as exc:
        cli.build_parser().parse_args(["--trials", value])
    assert exc.value.code == 2


def test_short_run_prints_report(capsys):
    code = cli.main(["--trials", "120", "--block-size", "40", "--seed", "3", "--no-progress"])
    assert code == 0
    out = capsys.readouterr().out
    assert "120 trials" in out
    assert "Royal Flush" in out


def test_engine_error_exits_with_status_1(monkeypatch, capsys):
    def broken(*args, **kwargs):
        raise ExhaustedDeck(5, 2)

    monkeypatch.setattr(cli, "simulate", broken)
    code = cli.main(["--trials", "10", "--no-progress"])
    assert code == 1
    assert "Error: cannot draw 5 card(s)" in capsys.readouterr().out


def test_check_flag_passes_on_exact_odds(monkeypatch, capsys):
    monkeypatch.setattr(cli, "check_against_theory", lambda counts: [])
    code = cli.main(["--trials", "50", "--block-size", "25", "--seed", "1", "--check", "--no-progress"])
    assert code == 0
    assert "within tolerance" in capsys.readouterr().out


def test_check_flag_fails_on_outliers(monkeypatch, capsys):
    monkeypatch.setattr(cli, "check_against_theory", lambda counts: ["x"])
    code = cli.main(["--trials", "50", "--block-size", "25", "--seed", "1", "--check", "--no-progress"])
    assert code == 1
    assert "FAILED" in capsys.readouterr().out
