"""Tests for the console driver."""

import pytest

from connect4_rules.interfaces.cli import SimpleCLI, main


def feed_input(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_replay_reports_win(capsys):
    assert SimpleCLI().run(["replay", "--moves", "0,1,0,1,0,1,0"]) == 0
    out = capsys.readouterr().out
    assert "Result: RED_WIN" in out
    assert "Winning line: [(0, 0), (0, 1), (0, 2), (0, 3)]" in out


def test_replay_without_win(capsys):
    assert SimpleCLI().run(["replay", "--moves", "3,4"]) == 0
    out = capsys.readouterr().out
    assert "Result: NOT_WIN" in out
    assert "Board is full" not in out


def test_replay_ignores_moves_after_win(capsys, caplog):
    assert SimpleCLI().run(["replay", "--moves", "0,1,0,1,0,1,0,5,5"]) == 0
    assert "Result: RED_WIN" in capsys.readouterr().out
    assert any("Ignoring 2 move(s)" in r.getMessage() for r in caplog.records)


def test_replay_full_column_is_fatal(capsys):
    assert SimpleCLI().run(["replay", "--moves", "0,0,0,0,0,0,0"]) == 1
    err = capsys.readouterr().err
    assert "move 7 (RED)" in err
    assert "Column 0 is full" in err


def test_replay_illegal_column_is_fatal(capsys):
    assert SimpleCLI().run(["replay", "--moves", "2,7"]) == 1
    assert "out of range" in capsys.readouterr().err


def test_replay_unparsable_moves(capsys):
    assert SimpleCLI().run(["replay", "--moves", "a,b"]) == 1
    assert "cannot parse" in capsys.readouterr().err


def test_play_until_win(monkeypatch, capsys):
    feed_input(monkeypatch, ["9", "x", "0", "1", "0", "1", "0", "1", "0"])
    assert SimpleCLI().run(["play"]) == 0
    out = capsys.readouterr().out
    assert "Column must be between 0 and 6." in out
    assert "Invalid input" in out
    assert "Red (X) wins!" in out


def test_play_full_column_reprompts(monkeypatch, capsys):
    feed_input(monkeypatch, ["0"] * 7 + ["q"])
    assert SimpleCLI().run(["play"]) == 0
    out = capsys.readouterr().out
    assert "Invalid move: Column 0 is full" in out
    assert "Quitting game." in out


def test_play_quits_on_end_of_input(monkeypatch, capsys):
    feed_input(monkeypatch, [])
    assert SimpleCLI().run(["play"]) == 0
    assert "Quitting game." in capsys.readouterr().out


def test_benchmark(capsys):
    assert SimpleCLI().run(["benchmark", "--iterations", "5"]) == 0
    assert "Played 5 games" in capsys.readouterr().out


def test_no_command(capsys):
    assert SimpleCLI().run([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_main_exits_with_status():
    with pytest.raises(SystemExit) as exc_info:
        main(["replay", "--moves", "3"])
    assert exc_info.value.code == 0
