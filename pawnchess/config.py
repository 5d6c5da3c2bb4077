"""
Configuration loading from config.yaml.

Uses typed dataclasses throughout so the rest of the app gets IDE
completion and type-checker support without touching raw dicts.
Every key is optional; a missing file is only an error when one was asked for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    exit_keyword: str = "exit"
    show_legal_moves: bool = False
    strict_double_step: bool = False   # also require the skipped square to be empty


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str | None = None   # no file means log records are discarded

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @property
    def file_path(self) -> Path | None:
        return Path(self.file) if self.file else None


@dataclass
class Config:
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load and validate config.yaml.

    Raises:
        FileNotFoundError: the file is missing.
        ValueError: fields are of the wrong shape or have invalid values.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {cfg_path.resolve()}\n"
            "Copy config.example.yaml to config.yaml to customise the game."
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    try:
        game_raw = raw.get("game") or {}
        game_cfg = GameConfig(
            exit_keyword=str(game_raw.get("exit_keyword", "exit")),
            show_legal_moves=bool(game_raw.get("show_legal_moves", False)),
            strict_double_step=bool(game_raw.get("strict_double_step", False)),
        )

        logging_raw = raw.get("logging") or {}
        log_file = logging_raw.get("file")
        logging_cfg = LoggingConfig(
            level=str(logging_raw.get("level", "WARNING")).upper(),
            file=str(log_file) if log_file else None,
        )

        config = Config(game=game_cfg, logging=logging_cfg)
        _validate(config)
        return config

    except (AttributeError, TypeError) as exc:
        raise ValueError(f"Invalid config.yaml structure: {exc}") from exc


def _validate(config: Config) -> None:
    if not config.game.exit_keyword.strip():
        raise ValueError("game.exit_keyword must not be empty")
    if config.logging.level not in _LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {_LOG_LEVELS}, got '{config.logging.level}'"
        )
