"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from kingfall.core.board import Board
from kingfall.core.types import Coord, SquareNotation


@pytest.fixture
def board() -> Board:
    """Fresh board in the standard starting position."""
    return Board()


@pytest.fixture
def notation() -> SquareNotation:
    return SquareNotation()


@pytest.fixture
def sq(notation: SquareNotation) -> Callable[[str], Coord]:
    """Square name → coordinate, e.g. ``sq("e4") == (4, 4)``."""
    return notation.parse


@pytest.fixture
def play() -> Callable[[Board, Sequence[str]], None]:
    """Apply ``"e2 e4"``-style moves, failing the test on any rejection."""

    def _play(board: Board, moves: Sequence[str]) -> None:
        for text in moves:
            from_sq, to_sq = text.split()
            result = board.apply_move(from_sq, to_sq)
            assert result, f"{text} rejected: {result.error!r}"

    return _play


@pytest.fixture
def king_hunt() -> tuple[str, ...]:
    """Moves after which the white queen captures the black king on e8."""
    return ("e2 e3", "f7 f6", "d1 h5", "a7 a6", "h5 e8")
