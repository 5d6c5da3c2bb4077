"""
Recoverable input errors.

Everything derived from InvalidInputError is a problem with what the player
typed: the game loop reports it and asks the same player again. Anything else
(e.g. an out-of-range Position built internally) is a bug and propagates.
"""

from __future__ import annotations

MSG_INVALID_INPUT = "Invalid Input"


class InvalidInputError(ValueError):
    """Base class for errors the player can fix by typing another command."""


class NotationError(InvalidInputError):
    """Text is not a square in algebraic notation."""


class MoveParseError(InvalidInputError):
    """Text is not a four-character coordinate move such as e2e4."""


class IllegalMoveError(InvalidInputError):
    """Well-formed move that the current position does not allow."""
