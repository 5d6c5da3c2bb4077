"""
Board coordinates and algebraic notation.

Internally row 0 is rank 8 (Black's side) and row 7 is rank 1, so "e2" is
Position(row=6, col=4).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pawnchess.errors import NotationError

SIZE = 8

_SQUARE_RE = re.compile(r"([a-h])([1-8])")


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not 0 <= self.row < SIZE:
            raise ValueError(f"row must be between 0 and {SIZE - 1} but was {self.row}")
        if not 0 <= self.col < SIZE:
            raise ValueError(f"column must be between 0 and {SIZE - 1} but was {self.col}")

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse a square name like "e2". Raises NotationError on anything else."""
        match = _SQUARE_RE.fullmatch(text)
        if match is None:
            raise NotationError(f"Cannot parse {text}")
        file, rank = match.groups()
        return cls(SIZE - int(rank), ord(file) - ord("a"))

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{SIZE - self.row}"
