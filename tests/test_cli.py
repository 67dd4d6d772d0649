"""Tests for the term-snake CLI."""

from term_snake import cli, controller, terminal
from term_snake.cli import _build_parser, main
from term_snake.controller import GameOverReason, GameResult


class _FakeController:
    result = GameResult(score=3, reason=GameOverReason.COLLISION, ticks=40)

    def __init__(self, term):
        self.term = term

    def run(self):
        return self.result


class TestCLIParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.log_file is None
        assert args.log_level is None

    def test_logging_flags(self):
        args = _build_parser().parse_args([
            "--log-file", "snake.log", "--log-level", "DEBUG",
        ])
        assert args.log_file == "snake.log"
        assert args.log_level == "DEBUG"


class TestMain:
    def test_prints_score_and_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr(controller, "GameController", _FakeController)
        monkeypatch.setattr(terminal, "AnsiTerminal", lambda: object())
        monkeypatch.setattr(cli, "_configure_logging", lambda args: None)
        assert main([]) == 0
        assert capsys.readouterr().out == "Game over! score: 3\n"

    def test_quit_also_exits_zero(self, monkeypatch, capsys):
        class QuitController(_FakeController):
            result = GameResult(score=0, reason=GameOverReason.QUIT, ticks=2)

        monkeypatch.setattr(controller, "GameController", QuitController)
        monkeypatch.setattr(terminal, "AnsiTerminal", lambda: object())
        monkeypatch.setattr(cli, "_configure_logging", lambda args: None)
        assert main([]) == 0
        assert capsys.readouterr().out == "Bye! score: 0\n"
