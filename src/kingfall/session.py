"""Line-oriented game session — the console loop around a :class:`Board`.

Reads commands of the form ``"e2 e4"``, applies them and writes the board
and any failure messages to a text stream.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TextIO

from kingfall.core.board import Board, MoveResult
from kingfall.core.enums import MoveError
from kingfall.render import RenderOptions, render_board, side_name

_LOGGER = logging.getLogger(__name__)

BANNER = (
    "========== Kingfall ==========\n"
    "Enter moves in algebraic notation (e.g., e2 e4)\n"
    "Enter 'quit' to exit"
)
PROMPT = "Enter move: "
QUIT_WORD = "quit"


class CommandKind(IntEnum):
    MOVE = auto()
    QUIT = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    from_sq: str = ""
    to_sq: str = ""


def parse_command(line: str) -> Command:
    """Split one input line into a command.

    Tokens beyond the second are ignored. Square tokens are lowercased.
    """
    text = line.strip()
    if text.lower() == QUIT_WORD:
        return Command(CommandKind.QUIT)
    tokens = text.split()
    if len(tokens) < 2:
        return Command(CommandKind.INVALID)
    return Command(CommandKind.MOVE, tokens[0].lower(), tokens[1].lower())


def failure_message(board: Board, result: MoveResult) -> str:
    """Human-readable reason for a rejected move."""
    error = result.error
    if error == MoveError.INVALID_NOTATION:
        return "Invalid notation. Please use algebraic notation (e.g., e2 to e4)."
    if error == MoveError.INVALID_COORDINATE:
        return "Invalid coordinates."
    if error == MoveError.NO_PIECE_AT_SOURCE:
        return f"No piece at position {result.from_sq}."
    if error == MoveError.WRONG_TURN:
        return f"It's {side_name(board.side_to_move)}'s turn."
    if error == MoveError.SAME_COLOR_CAPTURE:
        return "Cannot capture your own piece."
    if error == MoveError.ILLEGAL_SHAPE:
        return f"Invalid move for {result.piece}."
    raise ValueError(f"Move was not rejected: {result!r}")


class GameSession:
    """Drives one game from a stream of text lines.

    The session never validates moves itself; everything goes through
    :meth:`Board.apply_move`.
    """

    __slots__ = ("board", "_out", "_options")

    def __init__(
        self,
        board: Board | None = None,
        out: TextIO | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        self.board = board if board is not None else Board()
        self._out = out if out is not None else sys.stdout
        self._options = options or RenderOptions()

    def _write(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def show_board(self) -> None:
        self._write(render_board(self.board.snapshot(), self._options))

    def handle_line(self, line: str) -> bool:
        """Process one input line. Returns False when the session should stop."""
        command = parse_command(line)
        if command.kind == CommandKind.QUIT:
            _LOGGER.debug("quit requested")
            return False
        if command.kind == CommandKind.INVALID:
            self._write("Invalid input format. Use 'from to' (e.g., e2 e4).")
            return True

        result = self.board.apply_move(command.from_sq, command.to_sq)
        if not result:
            self._write(failure_message(self.board, result))
            self._write("Move failed. Try again.")
        return not self.board.is_game_over()

    def run(self, lines: Iterable[str]) -> int:
        """Play until quit, end of input or a captured king. Returns an exit code."""
        self._write(BANNER)
        source = iter(lines)
        while not self.board.is_game_over():
            self.show_board()
            self._write(PROMPT, end="")
            line = next(source, None)
            if line is None:
                self._write()
                break
            if not self.handle_line(line):
                break

        if self.board.is_game_over():
            self.show_board()
            self._write("Game over!")
            winner = self.board.winner()
            if winner is not None:
                self._write(f"{side_name(winner)} wins.")
        self._write("Thanks for playing!")
        return 0
