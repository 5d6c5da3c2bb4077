"""
Typed event dataclasses — the shared language between the game loop and any consumer.

The game loop (game.run_game) yields these. The CLI display or a test consumes them.
All events are frozen so a consumer can keep them around without the engine
changing them underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pawnchess.pawn import Color

GameOverReason = Literal[
    "last_rank",
    "no_pawns",
    "stalemate",
    "exited",
]


@dataclass(frozen=True)
class GameStartEvent:
    white_name: str
    black_name: str
    board_ascii: str


@dataclass(frozen=True)
class TurnStartEvent:
    color: Color
    player_name: str
    legal_moves: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InvalidMoveEvent:
    color: Color
    command: str  # the line as typed
    error: str


@dataclass(frozen=True)
class MoveAppliedEvent:
    color: Color
    move: str
    is_en_passant: bool
    board_ascii_after: str
    captured: list[str] = field(default_factory=list)  # squares the removed pawns stood on


@dataclass(frozen=True)
class GameOverEvent:
    reason: GameOverReason
    winner: Color | None
    winner_name: str | None


# Union type for type-safe pattern matching in consumers
GameEvent = (
    GameStartEvent
    | TurnStartEvent
    | InvalidMoveEvent
    | MoveAppliedEvent
    | GameOverEvent
)
