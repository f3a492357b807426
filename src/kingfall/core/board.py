"""Board - game state on an 8x8 grid and the single entry point for moves."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from kingfall.core.enums import Color, MoveError, PieceType
from kingfall.core.piece import Piece
from kingfall.core.rules import BoardView, Grid, is_valid_move
from kingfall.core.types import BOARD_SIZE, Coord, SquareNotation, is_valid_coord

_LOGGER = logging.getLogger(__name__)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`Board.apply_move`.

    Truthy on success. On failure ``error`` names the reason and the board
    is untouched.
    """

    from_sq: str
    to_sq: str
    error: MoveError | None = None
    piece: Piece | None = None
    captured: Piece | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Immutable copy of everything a renderer needs."""

    cells: Grid
    side_to_move: Color

    def piece_at(self, x: int, y: int) -> Piece | None:
        return self.cells[y][x]

    def rows(self) -> Iterator[tuple[Piece | None, ...]]:
        """Rows from rank 8 (y = 0) down to rank 1."""
        return iter(self.cells)


class Board:
    """Mutable 8×8 board plus side to move.

    The only mutator of the grid and of the turn flag is :meth:`apply_move`.
    """

    __slots__ = ("_grid", "_side_to_move", "_notation")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._side_to_move = Color.WHITE
        self._notation = SquareNotation()
        self._setup()

    def _setup(self) -> None:
        for x, pt in enumerate(_BACK_RANK):
            self._grid[0][x] = Piece(Color.BLACK, pt)
            self._grid[1][x] = Piece(Color.BLACK, PieceType.PAWN)
            self._grid[6][x] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[7][x] = Piece(Color.WHITE, pt)

    # -- Element access -----------------------------------------------------

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def notation(self) -> SquareNotation:
        return self._notation

    def __getitem__(self, coord: Coord) -> Piece | None:
        x, y = coord
        if not is_valid_coord(x, y):
            raise ValueError(f"Invalid coordinate: {coord!r}")
        return self._grid[y][x]

    def piece_at(self, name: str) -> Piece | None:
        """Piece on the named square, e.g. ``board.piece_at("e1")``."""
        return self[self._notation.parse(name)]

    def view(self) -> BoardView:
        """Read-only view for the rule predicates."""
        return BoardView(self._frozen_grid())

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(self._frozen_grid(), self._side_to_move)

    def _frozen_grid(self) -> Grid:
        return tuple(tuple(row) for row in self._grid)

    # -- Moves --------------------------------------------------------------

    def apply_move(self, from_name: str, to_name: str) -> MoveResult:
        """Validate and play ``from_name → to_name``.

        Either every check passes and the move is applied (capture removed,
        turn flipped), or nothing changes and the result carries the reason.
        """
        try:
            from_c = self._notation.parse(from_name)
            to_c = self._notation.parse(to_name)
        except ValueError:
            return self._reject(from_name, to_name, MoveError.INVALID_NOTATION)

        if not (is_valid_coord(*from_c) and is_valid_coord(*to_c)):
            return self._reject(from_name, to_name, MoveError.INVALID_COORDINATE)

        from_sq = self._notation.name(from_c)
        to_sq = self._notation.name(to_c)
        piece = self._grid[from_c[1]][from_c[0]]
        if piece is None:
            return self._reject(from_sq, to_sq, MoveError.NO_PIECE_AT_SOURCE)

        if piece.color != self._side_to_move:
            return self._reject(from_sq, to_sq, MoveError.WRONG_TURN, piece)

        target = self._grid[to_c[1]][to_c[0]]
        if target is not None and target.color == piece.color:
            return self._reject(from_sq, to_sq, MoveError.SAME_COLOR_CAPTURE, piece)

        if not is_valid_move(piece, from_c, to_c, self.view()):
            return self._reject(from_sq, to_sq, MoveError.ILLEGAL_SHAPE, piece)

        self._grid[to_c[1]][to_c[0]] = piece
        self._grid[from_c[1]][from_c[0]] = None
        self._side_to_move = self._side_to_move.opposite

        _LOGGER.debug("%s %s %s-%s", piece.color, piece.piece_type.name, from_sq, to_sq)
        if target is not None:
            _LOGGER.debug("captured %s on %s", target.piece_type.name, to_sq)
            if target.is_king:
                _LOGGER.info("%s king captured on %s", target.color, to_sq)
        return MoveResult(from_sq, to_sq, piece=piece, captured=target)

    @staticmethod
    def _reject(
        from_sq: str,
        to_sq: str,
        error: MoveError,
        piece: Piece | None = None,
    ) -> MoveResult:
        _LOGGER.debug("rejected %r-%r: %s", from_sq, to_sq, error.name)
        return MoveResult(from_sq, to_sq, error=error, piece=piece)

    # -- Game status --------------------------------------------------------

    def _kings_present(self) -> set[Color]:
        return {
            piece.color
            for row in self._grid
            for piece in row
            if piece is not None and piece.is_king
        }

    def is_game_over(self) -> bool:
        """True once either king is missing from the board."""
        return len(self._kings_present()) < 2

    def winner(self) -> Color | None:
        """Color whose king survives, or None while both (or neither) remain."""
        kings = self._kings_present()
        if len(kings) == 1:
            return next(iter(kings))
        return None

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid == other._grid and self._side_to_move == other._side_to_move
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{BOARD_SIZE - y} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
