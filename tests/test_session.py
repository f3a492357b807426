"""Tests for the console game session."""

import io

import pytest

from kingfall.core.board import Board
from kingfall.core.enums import Color
from kingfall.session import CommandKind, GameSession, parse_command


def _session(board: Board | None = None) -> tuple[GameSession, io.StringIO]:
    out = io.StringIO()
    return GameSession(board or Board(), out), out


class TestParseCommand:
    def test_move(self) -> None:
        cmd = parse_command("e2 e4\n")
        assert cmd.kind == CommandKind.MOVE
        assert (cmd.from_sq, cmd.to_sq) == ("e2", "e4")

    def test_move_is_lowercased(self) -> None:
        cmd = parse_command("  E2   E4 ")
        assert (cmd.from_sq, cmd.to_sq) == ("e2", "e4")

    def test_extra_tokens_ignored(self) -> None:
        cmd = parse_command("e2 e4 please")
        assert (cmd.from_sq, cmd.to_sq) == ("e2", "e4")

    @pytest.mark.parametrize("line", ["quit", "QUIT\n", "  Quit  "])
    def test_quit(self, line: str) -> None:
        assert parse_command(line).kind == CommandKind.QUIT

    @pytest.mark.parametrize("line", ["", "e2", "e2e4", "   \n"])
    def test_invalid(self, line: str) -> None:
        assert parse_command(line).kind == CommandKind.INVALID


class TestHandleLine:
    def test_valid_move(self) -> None:
        session, out = _session()
        assert session.handle_line("e2 e4")
        assert session.board.side_to_move == Color.BLACK
        assert out.getvalue() == ""

    def test_quit_stops(self) -> None:
        session, _ = _session()
        assert not session.handle_line("quit")

    def test_invalid_input(self) -> None:
        session, out = _session()
        assert session.handle_line("e2")
        assert "Invalid input format" in out.getvalue()

    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ("z9 e4", "Invalid notation."),
            ("e4 e5", "No piece at position e4."),
            ("e7 e5", "It's White's turn."),
            ("a1 a2", "Cannot capture your own piece."),
            ("b1 b3", "Invalid move for N."),
        ],
    )
    def test_failure_messages(self, line: str, message: str) -> None:
        session, out = _session()
        assert session.handle_line(line)
        text = out.getvalue()
        assert message in text
        assert "Move failed. Try again." in text
        assert session.board.side_to_move == Color.WHITE


class TestRun:
    def test_quit_ends_session(self) -> None:
        session, out = _session()
        assert session.run(["e2 e4\n", "quit\n", "e7 e5\n"]) == 0
        text = out.getvalue()
        assert text.startswith("========== Kingfall ==========")
        assert "Enter move: " in text
        assert "Game over!" not in text
        assert text.rstrip().endswith("Thanks for playing!")
        assert session.board.side_to_move == Color.BLACK

    def test_end_of_input(self) -> None:
        session, out = _session()
        session.run([])
        assert out.getvalue().rstrip().endswith("Thanks for playing!")

    def test_king_capture_ends_game(self, king_hunt: tuple[str, ...]) -> None:
        session, out = _session()
        session.run([f"{move}\n" for move in king_hunt] + ["a6 a5\n"])
        text = out.getvalue()
        assert "Game over!" in text
        assert "White wins." in text
        assert session.board.is_game_over()
        # Input after the capture is never read.
        assert session.board.piece_at("a6") is not None

    def test_board_redrawn_each_prompt(self) -> None:
        session, out = _session()
        session.run(["e2 e4\n", "bogus\n"])
        assert out.getvalue().count("White to move") == 1
        assert out.getvalue().count("Black to move") == 2
