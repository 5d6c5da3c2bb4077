"""
Pawns-Only Chess — entry point.

Wires together:  config → logging → name prompts → game loop → CLI display
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from pawnchess.board import Board
from pawnchess.cli.display import console, display_event
from pawnchess.cli.prompts import ask_player_names, command_reader
from pawnchess.config import Config, LoggingConfig, load_config
from pawnchess.game import Game, run_game
from pawnchess.pawn import Color
from pawnchess.players import Player


def _setup_logging(cfg: LoggingConfig) -> None:
    handler: logging.Handler
    log_file = cfg.file_path
    if log_file is None:
        handler = logging.NullHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=2 * 1024 * 1024, backupCount=3,  # 2 MB × 3 files
            encoding="utf-8",
        )
    logging.basicConfig(
        level=cfg.level_number,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        handlers=[handler],
    )


def main() -> None:
    config_path = Path("config.yaml")
    try:
        config = load_config(config_path) if config_path.exists() else Config()
    except ValueError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    _setup_logging(config.logging)

    console.print("Pawns-Only Chess")
    try:
        first_name, second_name = ask_player_names()
    except (EOFError, KeyboardInterrupt):
        console.print("\nBye!")
        return

    game = Game(
        Board(),
        Player(first_name, Color.WHITE),
        Player(second_name, Color.BLACK),
        exit_keyword=config.game.exit_keyword,
        strict_double_step=config.game.strict_double_step,
    )

    try:
        for event in run_game(game, command_reader(config.game.exit_keyword)):
            display_event(event, show_legal_moves=config.game.show_legal_moves)
    except KeyboardInterrupt:
        console.print("\nBye!")


if __name__ == "__main__":
    main()
