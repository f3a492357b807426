"""Piece movement rules: shape predicates and the path-obstruction check.

Every predicate answers one question: may *piece*, standing on ``from_c``,
relocate to ``to_c`` given the board contents?  Turn order, same-color
captures and king safety are not considered here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from kingfall.core.enums import PieceType
from kingfall.core.piece import Piece
from kingfall.core.types import (
    BOARD_SIZE,
    Coord,
    coord_delta,
    is_valid_coord,
    sign,
)

Grid: TypeAlias = tuple[tuple[Piece | None, ...], ...]  # grid[y][x]


@dataclass(frozen=True, slots=True)
class BoardView:
    """Read-only 8×8 view of the board handed to the rule predicates."""

    grid: Grid

    def __getitem__(self, coord: Coord) -> Piece | None:
        x, y = coord
        return self.grid[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.grid[y][x] is None

    def occupied(self) -> Iterator[tuple[Coord, Piece]]:
        """Yield ``((x, y), piece)`` for every occupied square."""
        for y, row in enumerate(self.grid):
            for x, piece in enumerate(row):
                if piece is not None:
                    yield (x, y), piece

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> BoardView:
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def from_pieces(cls, pieces: Mapping[Coord, Piece]) -> BoardView:
        """Build a view with only *pieces* on it, e.g. ``{(4, 4): rook}``."""
        rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for (x, y), piece in pieces.items():
            if not is_valid_coord(x, y):
                raise ValueError(f"Invalid coordinate: {(x, y)!r}")
            rows[y][x] = piece
        return cls(tuple(tuple(row) for row in rows))


# -- Path obstruction --------------------------------------------------------


def is_path_clear(from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    """Whether every square strictly between the two coordinates is empty.

    Only meaningful along a rank, file or diagonal. The destination square
    itself is not examined.
    """
    dx, dy = coord_delta(from_c, to_c)
    step_x, step_y = sign(dx), sign(dy)
    x, y = from_c[0] + step_x, from_c[1] + step_y
    while (x, y) != to_c:
        if not view.is_empty(x, y):
            return False
        x += step_x
        y += step_y
    return True


# -- Per-kind predicates ------------------------------------------------------

# White advances toward row 0, black toward row 7.
_PAWN_DIRECTION = (-1, 1)
_PAWN_START_ROW = (6, 1)


def _pawn_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    start_row = _PAWN_START_ROW[piece.color]
    dx, dy = coord_delta(from_c, to_c)
    target = view[to_c]

    if dx == 0:
        if dy == direction:
            return target is None
        if dy == 2 * direction and from_c[1] == start_row:
            return target is None and view.is_empty(from_c[0], from_c[1] + direction)
        return False

    # Diagonal capture
    if abs(dx) == 1 and dy == direction:
        return target is not None and target.color != piece.color
    return False


def _is_straight(dx: int, dy: int) -> bool:
    return (dx == 0) != (dy == 0)


def _is_diagonal(dx: int, dy: int) -> bool:
    return abs(dx) == abs(dy) != 0


def _rook_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    dx, dy = coord_delta(from_c, to_c)
    return _is_straight(dx, dy) and is_path_clear(from_c, to_c, view)


def _knight_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    dx, dy = coord_delta(from_c, to_c)
    return {abs(dx), abs(dy)} == {1, 2}


def _bishop_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    dx, dy = coord_delta(from_c, to_c)
    return _is_diagonal(dx, dy) and is_path_clear(from_c, to_c, view)


def _queen_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    dx, dy = coord_delta(from_c, to_c)
    if not (_is_straight(dx, dy) or _is_diagonal(dx, dy)):
        return False
    return is_path_clear(from_c, to_c, view)


def _king_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    dx, dy = coord_delta(from_c, to_c)
    return abs(dx) <= 1 and abs(dy) <= 1 and (dx, dy) != (0, 0)


MovePredicate = Callable[[Piece, Coord, Coord, BoardView], bool]

RULES: Mapping[PieceType, MovePredicate] = {
    PieceType.PAWN: _pawn_move,
    PieceType.KNIGHT: _knight_move,
    PieceType.BISHOP: _bishop_move,
    PieceType.ROOK: _rook_move,
    PieceType.QUEEN: _queen_move,
    PieceType.KING: _king_move,
}


def is_valid_move(piece: Piece, from_c: Coord, to_c: Coord, view: BoardView) -> bool:
    """Whether the move shape (and path, for sliders) is legal for *piece*.

    Off-board coordinates are never legal.
    """
    if not (is_valid_coord(*from_c) and is_valid_coord(*to_c)):
        return False
    return RULES[piece.piece_type](piece, from_c, to_c, view)
