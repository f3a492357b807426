"""Plain-text rendering of a board snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from kingfall.core.board import BoardSnapshot
from kingfall.core.enums import Color
from kingfall.core.types import BOARD_SIZE, FILES


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How the console draws the board.

    Args:
        unicode: Draw pieces as chess glyphs instead of letters.
        shade: Mark empty light squares with a dot.
    """

    unicode: bool = False
    shade: bool = True


_FILE_LABELS = "   " + " ".join(FILES)
_FRAME = "  +" + "-" * (2 * BOARD_SIZE + 1) + "+"


def render_board(snapshot: BoardSnapshot, options: RenderOptions | None = None) -> str:
    """Framed board with rank/file labels and a side-to-move line."""
    opts = options or RenderOptions()
    lines = ["", _FILE_LABELS, _FRAME]
    for y, row in enumerate(snapshot.rows()):
        rank = BOARD_SIZE - y
        cells: list[str] = []
        for x, piece in enumerate(row):
            if piece is not None:
                cells.append(piece.symbol if opts.unicode else str(piece))
            elif opts.shade and (x + y) % 2 == 0:
                cells.append(".")
            else:
                cells.append(" ")
        lines.append(f"{rank} |{' '.join(cells)} | {rank}")
    lines.append(_FRAME)
    lines.append(_FILE_LABELS)
    lines.append("")
    lines.append(f"{side_name(snapshot.side_to_move)} to move")
    return "\n".join(lines)


def side_name(color: Color) -> str:
    return str(color).capitalize()
