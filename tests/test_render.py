"""Tests for the text renderer."""

from collections.abc import Callable, Sequence

from kingfall.core.board import Board
from kingfall.core.enums import Color
from kingfall.render import RenderOptions, render_board, side_name


class TestRenderBoard:
    def test_initial_layout(self, board: Board) -> None:
        lines = render_board(board.snapshot()).splitlines()
        assert lines[1] == "   a b c d e f g h"
        assert lines[2] == "  +-----------------+"
        assert lines[3] == "8 |r n b q k b n r | 8"
        assert lines[4] == "7 |p p p p p p p p | 7"
        assert lines[9] == "2 |P P P P P P P P | 2"
        assert lines[10] == "1 |R N B Q K B N R | 1"
        assert lines[11] == "  +-----------------+"
        assert lines[-1] == "White to move"

    def test_light_squares_shaded(self, board: Board) -> None:
        lines = render_board(board.snapshot()).splitlines()
        # Rank 6 is row 2: light squares on even files.
        assert lines[5] == "6 |.   .   .   .   | 6"
        assert lines[6] == "5 |  .   .   .   . | 5"

    def test_no_shade(self, board: Board) -> None:
        lines = render_board(board.snapshot(), RenderOptions(shade=False)).splitlines()
        assert lines[5] == "6 |" + " " * 15 + " | 6"

    def test_unicode_pieces(self, board: Board) -> None:
        text = render_board(board.snapshot(), RenderOptions(unicode=True))
        assert "♚" in text
        assert "♔" in text
        assert "K" not in text.replace("White to move", "")

    def test_side_to_move_line(
        self, board: Board, play: Callable[[Board, Sequence[str]], None]
    ) -> None:
        play(board, ["e2 e4"])
        assert render_board(board.snapshot()).endswith("Black to move")


def test_side_name() -> None:
    assert side_name(Color.WHITE) == "White"
    assert side_name(Color.BLACK) == "Black"
