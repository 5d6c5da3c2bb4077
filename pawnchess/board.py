"""
The set of live pawns.

Pawns sit in an arena of slots. Removing a pawn empties its slot for good,
so a captured pawn can never be found again by any lookup.
"""

from __future__ import annotations

from collections.abc import Iterable

from pawnchess.pawn import Color, Pawn
from pawnchess.position import SIZE, Position
from pawnchess.renderer import render_ascii


class Board:
    def __init__(self, pawns: Iterable[Pawn] | None = None) -> None:
        if pawns is None:
            pawns = _starting_pawns()
        self._slots: list[Pawn | None] = []
        for pawn in pawns:
            if self.at(pawn.position) is not None:
                raise ValueError(f"Square {pawn.position} is already occupied")
            self._slots.append(pawn)

    @classmethod
    def from_squares(cls, white: Iterable[str] = (), black: Iterable[str] = ()) -> Board:
        """Build a position from square names, e.g. Board.from_squares(white=["e4"], black=["d5"])."""
        pawns = [Pawn(Position.parse(s), Color.WHITE) for s in white]
        pawns += [Pawn(Position.parse(s), Color.BLACK) for s in black]
        return cls(pawns)

    # ------------------------------------------------------------------ #
    # Lookups                                                              #
    # ------------------------------------------------------------------ #

    @property
    def pawns(self) -> list[Pawn]:
        return [pawn for pawn in self._slots if pawn is not None]

    def at(self, position: Position) -> Pawn | None:
        for pawn in self._slots:
            if pawn is not None and pawn.position == position:
                return pawn
        return None

    def of_color(self, color: Color) -> list[Pawn]:
        return [pawn for pawn in self.pawns if pawn.color is color]

    def contains(self, row: int, col: int) -> bool:
        """Bounds check only; says nothing about occupancy."""
        return 0 <= row < SIZE and 0 <= col < SIZE

    # ------------------------------------------------------------------ #
    # Mutation                                                             #
    # ------------------------------------------------------------------ #

    def remove(self, pawn: Pawn) -> bool:
        """Take this exact pawn off the board. Returns False if it was not on it."""
        for index, slot in enumerate(self._slots):
            if slot is pawn:
                self._slots[index] = None
                return True
        return False

    def __str__(self) -> str:
        return render_ascii(self)


def _starting_pawns() -> list[Pawn]:
    files = "abcdefgh"
    white = [Pawn(Position.parse(f"{f}2"), Color.WHITE) for f in files]
    black = [Pawn(Position.parse(f"{f}7"), Color.BLACK) for f in files]
    return white + black
