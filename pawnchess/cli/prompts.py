"""
Reading from the terminal: the two name prompts and one command per turn.

The turn prompt itself ("<name>'s turn:") is printed by cli/display.py when
the TurnStartEvent arrives, so reading a command only reads the line.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.prompt import Prompt

from pawnchess.cli.display import console
from pawnchess.players import Player


def ask_player_names() -> tuple[str, str]:
    """Ask for the first (White) and second (Black) player's names."""
    first = Prompt.ask("First Player's name", console=console)
    second = Prompt.ask("Second Player's name", console=console)
    return first.strip(), second.strip()


def command_reader(exit_keyword: str) -> Callable[[Player], str]:
    """Build a read_command callback for run_game. End of input counts as exiting."""

    def read_command(player: Player) -> str:
        try:
            return console.input()
        except EOFError:
            return exit_keyword

    return read_command
