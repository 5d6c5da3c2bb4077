"""
Fixed-width text rendering of the board.

Rank 8 is printed first, each cell shows the occupant's color code (W/B) or a
blank, and file letters run underneath.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnchess.position import SIZE, Position

if TYPE_CHECKING:
    from pawnchess.board import Board

_RULE = "  " + "+---" * SIZE + "+"
_FILES = "    " + "   ".join("abcdefgh"[:SIZE])


def render_ascii(board: Board) -> str:
    lines: list[str] = []
    for row in range(SIZE):
        lines.append(_RULE)
        cells = []
        for col in range(SIZE):
            pawn = board.at(Position(row, col))
            cells.append(f" {pawn.color.code if pawn else ' '} |")
        lines.append(f"{SIZE - row} |" + "".join(cells))
    lines.append(_RULE)
    lines.append(_FILES)
    return "\n".join(lines) + "\n"
