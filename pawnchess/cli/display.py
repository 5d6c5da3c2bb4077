"""
Rich-based CLI event consumer.

This is the ONLY place where game output happens.
It translates GameEvent objects into terminal output. The board diagram is
printed verbatim; messages get light styling.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from pawnchess.events import (
    GameEvent,
    GameOverEvent,
    GameStartEvent,
    InvalidMoveEvent,
    MoveAppliedEvent,
    TurnStartEvent,
)

console = Console(legacy_windows=False)


def display_event(event: GameEvent, *, show_legal_moves: bool = False) -> None:
    """Dispatch a GameEvent to the appropriate display function."""
    match event:
        case GameStartEvent():
            _board(event.board_ascii)
        case TurnStartEvent():
            _turn_start(event, show_legal_moves)
        case InvalidMoveEvent():
            console.print(f"[red]{escape(event.error)}[/]", highlight=False)
        case MoveAppliedEvent():
            _board(event.board_ascii_after)
        case GameOverEvent():
            _game_over(event)


# --------------------------------------------------------------------------- #
# Display functions                                                            #
# --------------------------------------------------------------------------- #

def _board(board_ascii: str) -> None:
    console.print(board_ascii, markup=False, highlight=False)


def _turn_start(event: TurnStartEvent, show_legal_moves: bool) -> None:
    console.print(f"{event.player_name}'s turn:", markup=False, highlight=False)
    if show_legal_moves and event.legal_moves:
        console.print(f"[dim]Legal: {' '.join(event.legal_moves)}[/]", highlight=False)


def _game_over(event: GameOverEvent) -> None:
    if event.reason == "stalemate":
        console.print("[bold yellow]Stalemate![/]")
    elif event.winner is not None:
        console.print(f"[bold green]{event.winner.title} Wins![/]")
    console.print("Bye!")
