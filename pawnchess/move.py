"""
Moves and how they change a board.

A Move is a from→to pair. EnPassant is the one move whose victim does not
stand on the destination square, so it carries the captured pawn with it.
Equality ignores the subtype: a typed "e5d6" equals the offered en-passant
capture e5d6, which is how the game finds the offer to apply.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from pawnchess.errors import MSG_INVALID_INPUT, MoveParseError
from pawnchess.position import Position

if TYPE_CHECKING:
    from pawnchess.board import Board
    from pawnchess.pawn import Pawn

logger = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"([a-h][1-8])([a-h][1-8])")


class Move:
    __slots__ = ("from_", "to")

    def __init__(self, from_: Position, to: Position) -> None:
        self.from_ = from_
        self.to = to

    @classmethod
    def parse(cls, text: str) -> Move:
        match = _MOVE_RE.fullmatch(text)
        if match is None:
            raise MoveParseError(MSG_INVALID_INPUT)
        from_, to = match.groups()
        return cls(Position.parse(from_), Position.parse(to))

    @property
    def is_double_step(self) -> bool:
        """Straight advance of exactly two rows."""
        return self.from_.col == self.to.col and abs(self.to.row - self.from_.row) == 2

    def apply(self, board: Board) -> tuple[Pawn, ...]:
        """Move the pawn on from_ to to, capturing whatever stands there. Returns every pawn removed."""
        occupant = board.at(self.to)
        if occupant is not None:
            board.remove(occupant)
        mover = board.at(self.from_)
        if mover is not None:
            mover.move_to(self.to)
        return (occupant,) if occupant is not None else ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.from_ == other.from_ and self.to == other.to

    def __hash__(self) -> int:
        return hash((self.from_, self.to))

    def __str__(self) -> str:
        return f"{self.from_}{self.to}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"


class EnPassant(Move):
    __slots__ = ("captured",)

    def __init__(self, from_: Position, to: Position, captured: Pawn) -> None:
        super().__init__(from_, to)
        self.captured = captured

    def apply(self, board: Board) -> tuple[Pawn, ...]:
        board.remove(self.captured)
        logger.debug("En passant %s takes pawn on %s", self, self.captured.position)
        # The landing square is only occupied when the advance jumped a pawn.
        return (self.captured, *super().apply(board))
