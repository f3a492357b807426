"""Core domain layer — move legality and board state with zero external dependencies.

Quick start::

    from kingfall.core import Board

    board = Board()
    result = board.apply_move("e2", "e4")
    if not result:
        print(result.error.description)
"""

from kingfall.core.board import Board, BoardSnapshot, MoveResult
from kingfall.core.enums import Color, MoveError, PieceType
from kingfall.core.piece import Piece
from kingfall.core.rules import BoardView, is_path_clear, is_valid_move
from kingfall.core.types import Coord, SquareNotation, is_valid_coord

__all__ = [
    # Enums
    "Color",
    "MoveError",
    "PieceType",
    # Types / helpers
    "Coord",
    "SquareNotation",
    "is_valid_coord",
    # Rules
    "BoardView",
    "is_path_clear",
    "is_valid_move",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "MoveResult",
    "Piece",
]
