"""
Pawns and their move generation.

One Pawn class covers both sides; the Color carries everything that differs
(forward direction, starting row, last row), so the generation code is
written once and mirrored by the sign of the direction.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pawnchess.move import Move
from pawnchess.position import Position

if TYPE_CHECKING:
    from pawnchess.board import Board


class Color(Enum):
    WHITE = ("W", -1, 6, 0)
    BLACK = ("B", 1, 1, 7)

    def __init__(self, code: str, direction: int, start_row: int, last_row: int) -> None:
        self.code = code
        self.direction = direction
        self.start_row = start_row
        self.last_row = last_row

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def title(self) -> str:
        return self.name.capitalize()


class Pawn:
    """
    A single pawn on the board.

    Pawns compare by identity: two pawns of the same color on the same square
    at different times are still different pieces.
    """

    def __init__(self, position: Position, color: Color) -> None:
        self.position = position
        self.color = color

    def move_to(self, position: Position) -> None:
        self.position = position

    def has_reached_last_row(self) -> bool:
        return self.position.row == self.color.last_row

    def valid_moves(self, board: Board, *, strict_double_step: bool = False) -> list[Move]:
        """
        Legal moves from the current square given the board's occupancy.

        Straight moves need an empty destination, diagonal moves need an
        opposing pawn there. The two-square opening advance only checks its
        destination unless strict_double_step is set.
        """
        moves: list[Move] = []
        for target in self._candidates(board):
            occupant = board.at(target)
            if target.col == self.position.col:
                legal = occupant is None
                if legal and strict_double_step and abs(target.row - self.position.row) == 2:
                    legal = board.at(self._step(1)) is None
            else:
                legal = occupant is not None and occupant.color is not self.color
            if legal:
                moves.append(Move(self.position, target))
        return moves

    def _candidates(self, board: Board) -> list[Position]:
        row = self.position.row + self.color.direction
        col = self.position.col
        candidates: list[Position] = []
        if board.contains(row, col):
            candidates.append(Position(row, col))
            for side in (col + 1, col - 1):
                if board.contains(row, side):
                    candidates.append(Position(row, side))
        if self.position.row == self.color.start_row:
            candidates.append(self._step(2))
        return candidates

    def _step(self, squares: int) -> Position:
        return Position(self.position.row + squares * self.color.direction, self.position.col)

    def __repr__(self) -> str:
        return f"Pawn({self.color.name}, {self.position})"
