"""Coordinate type alias and the square-name bijection.

Board layout (row 0 is the black back rank):
    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    a7=(0, 1), ...
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

x is the file index (a–h), y is the row index counted from rank 8 down.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (x, y), both 0–7

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_coord(x: int, y: int) -> bool:
    """Check whether both components lie on the 8×8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def sign(n: int) -> int:
    return (n > 0) - (n < 0)


def coord_delta(from_c: Coord, to_c: Coord) -> tuple[int, int]:
    """Signed (dx, dy) from *from_c* to *to_c*."""
    return to_c[0] - from_c[0], to_c[1] - from_c[1]


class SquareNotation:
    """Fixed bijection between square names ('e4') and coordinates.

    Built once per board; each board owns its own instance so that boards
    never share mutable state.
    """

    __slots__ = ("_to_coord", "_to_name")

    def __init__(self) -> None:
        self._to_coord: dict[str, Coord] = {}
        self._to_name: dict[Coord, str] = {}
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                name = FILES[x] + RANKS[BOARD_SIZE - 1 - y]
                self._to_coord[name] = (x, y)
                self._to_name[(x, y)] = name

    def parse(self, name: str) -> Coord:
        """Parse square name, e.g. 'e4' → (4, 4). Uppercase letters are accepted."""
        try:
            return self._to_coord[name.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid square name: {name!r}") from None

    def name(self, coord: Coord) -> str:
        """Human-readable name, e.g. (0, 7) → 'a1'."""
        try:
            return self._to_name[coord]
        except KeyError:
            raise ValueError(f"Invalid coordinate: {coord!r}") from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._to_coord

    def __len__(self) -> int:
        return len(self._to_coord)

    def __iter__(self) -> Iterator[str]:
        return iter(self._to_coord)
