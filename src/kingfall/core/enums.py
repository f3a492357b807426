"""Core enumerations for the board game domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveError(IntEnum):
    """Reason a proposed move was rejected by the board."""

    INVALID_NOTATION = 1
    INVALID_COORDINATE = 2
    NO_PIECE_AT_SOURCE = 3
    WRONG_TURN = 4
    SAME_COLOR_CAPTURE = 5
    ILLEGAL_SHAPE = 6

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[MoveError, str] = {
    MoveError.INVALID_NOTATION: "square name is not in algebraic notation",
    MoveError.INVALID_COORDINATE: "square lies outside the board",
    MoveError.NO_PIECE_AT_SOURCE: "no piece on the source square",
    MoveError.WRONG_TURN: "piece belongs to the side not on move",
    MoveError.SAME_COLOR_CAPTURE: "destination holds a piece of the same color",
    MoveError.ILLEGAL_SHAPE: "piece cannot move that way",
}
