"""A player is a name and a side; pawns are always looked up on the board."""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.board import Board
from pawnchess.pawn import Color, Pawn


@dataclass(frozen=True)
class Player:
    name: str
    color: Color

    def pawns(self, board: Board) -> list[Pawn]:
        return board.of_color(self.color)
