"""
Turn resolution and the game loop.

Game is the rules engine: it takes one raw command at a time, validates it
against the side to move, applies it and decides whether the game is over.
It never prints and never reads input.

run_game() drives a Game with commands from any source and yields typed
GameEvent objects. Consumers:
  CLI   → pawnchess/cli/display.py
  Tests → for event in run_game(game, commands): assert ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from pawnchess.board import Board
from pawnchess.errors import MSG_INVALID_INPUT, IllegalMoveError, InvalidInputError
from pawnchess.events import (
    GameEvent,
    GameOverEvent,
    GameOverReason,
    GameStartEvent,
    InvalidMoveEvent,
    MoveAppliedEvent,
    TurnStartEvent,
)
from pawnchess.move import EnPassant, Move
from pawnchess.pawn import Color, Pawn
from pawnchess.players import Player
from pawnchess.position import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnState:
    """
    Who moves, who waits, and which en-passant captures the mover may make.

    A new TurnState replaces the old one after every accepted move, so an
    en-passant offer exists for exactly one turn.
    """

    current: Player
    waiting: Player
    en_passant: tuple[EnPassant, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GameOutcome:
    reason: GameOverReason
    winner: Player | None = None


@dataclass(frozen=True)
class AppliedMove:
    player: Player
    move: Move
    captured: tuple[Pawn, ...] = ()


class Game:
    def __init__(
        self,
        board: Board,
        first: Player,
        second: Player,
        *,
        exit_keyword: str = "exit",
        strict_double_step: bool = False,
    ) -> None:
        self.board = board
        self.state = TurnState(current=first, waiting=second)
        self.outcome: GameOutcome | None = None
        self._exit_keyword = exit_keyword.strip().lower()
        self._strict_double_step = strict_double_step

    @property
    def current_player(self) -> Player:
        return self.state.current

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    def player_of(self, color: Color) -> Player:
        return self.state.current if self.state.current.color is color else self.state.waiting

    def legal_moves(self) -> list[Move]:
        """Everything the side to move may play, pending en-passant offers first, each move once."""
        return list(dict.fromkeys(self._moves_for(self.state)))

    # ------------------------------------------------------------------ #
    # Turn protocol                                                        #
    # ------------------------------------------------------------------ #

    def play(self, command: str) -> AppliedMove | None:
        """
        Resolve one command for the side to move.

        Returns the applied move, or None when the command was the exit
        keyword. Raises an InvalidInputError subclass (with the board
        untouched) when the command cannot be played.
        """
        if self.outcome is not None:
            raise RuntimeError("The game is already over")

        command = command.strip().lower()
        if command == self._exit_keyword:
            self.outcome = GameOutcome(reason="exited")
            logger.info("%s left the game", self.state.current.name)
            return None

        requested = Move.parse(command)
        pawn = self._grab_pawn(requested)
        move = self._resolve(requested, pawn)

        mover, opponent = self.state.current, self.state.waiting
        captured = move.apply(self.board)
        logger.debug("%s played %s", mover.name, move)
        for victim in captured:
            logger.debug("Captured %s pawn on %s", victim.color.name.lower(), victim.position)

        next_state = TurnState(
            current=opponent,
            waiting=mover,
            en_passant=self._en_passant_offers(move, pawn),
        )

        if pawn.has_reached_last_row():
            self._finish(GameOutcome(reason="last_rank", winner=mover))
        elif not opponent.pawns(self.board):
            self._finish(GameOutcome(reason="no_pawns", winner=mover))
        elif not self._moves_for(next_state):
            self._finish(GameOutcome(reason="stalemate"))
        else:
            self.state = next_state

        return AppliedMove(player=mover, move=move, captured=captured)

    def _grab_pawn(self, move: Move) -> Pawn:
        pawn = self.board.at(move.from_)
        color = self.state.current.color
        if pawn is None or pawn.color is not color:
            raise IllegalMoveError(f"No {color.name.lower()} pawn at {move.from_}")
        return pawn

    def _resolve(self, requested: Move, pawn: Pawn) -> Move:
        """Find the legal move equal to what was typed, preferring an en-passant offer."""
        options = list(self.state.en_passant)
        options += pawn.valid_moves(self.board, strict_double_step=self._strict_double_step)
        for option in options:
            if option == requested:
                return option
        raise IllegalMoveError(MSG_INVALID_INPUT)

    def _en_passant_offers(self, move: Move, pawn: Pawn) -> tuple[EnPassant, ...]:
        if not move.is_double_step:
            return ()

        behind = Position(move.from_.row + pawn.color.direction, move.from_.col)
        offers: list[EnPassant] = []
        for col in (move.to.col - 1, move.to.col + 1):
            if not self.board.contains(move.to.row, col):
                continue
            neighbour = self.board.at(Position(move.to.row, col))
            if neighbour is not None and neighbour.color is pawn.color.opponent:
                offers.append(EnPassant(neighbour.position, behind, pawn))

        if offers:
            logger.debug("En passant available: %s", ", ".join(str(o) for o in offers))
        return tuple(offers)

    def _moves_for(self, state: TurnState) -> list[Move]:
        moves: list[Move] = list(state.en_passant)
        for pawn in state.current.pawns(self.board):
            moves += pawn.valid_moves(self.board, strict_double_step=self._strict_double_step)
        return moves

    def _finish(self, outcome: GameOutcome) -> None:
        self.outcome = outcome
        self.state = TurnState(current=self.state.current, waiting=self.state.waiting)
        if outcome.winner is not None:
            logger.info("Game over (%s): %s wins", outcome.reason, outcome.winner.name)
        else:
            logger.info("Game over (%s)", outcome.reason)


def run_game(game: Game, read_command: Callable[[Player], str]) -> Iterator[GameEvent]:
    """
    Play a game to the end, yielding events for every significant action.

    read_command is called with the player to move and must return one raw
    line. Invalid lines are reported and the same player is asked again.
    """
    white = game.player_of(Color.WHITE)
    black = game.player_of(Color.BLACK)
    yield GameStartEvent(
        white_name=white.name,
        black_name=black.name,
        board_ascii=str(game.board),
    )

    while game.outcome is None:
        player = game.current_player
        yield TurnStartEvent(
            color=player.color,
            player_name=player.name,
            legal_moves=[str(m) for m in game.legal_moves()],
        )

        command = read_command(player)
        try:
            applied = game.play(command)
        except InvalidInputError as exc:
            logger.info("Rejected %r from %s: %s", command, player.name, exc)
            yield InvalidMoveEvent(color=player.color, command=command, error=str(exc))
            continue

        if applied is not None:
            yield MoveAppliedEvent(
                color=player.color,
                move=str(applied.move),
                is_en_passant=isinstance(applied.move, EnPassant),
                captured=[str(victim.position) for victim in applied.captured],
                board_ascii_after=str(game.board),
            )

    winner = game.outcome.winner
    yield GameOverEvent(
        reason=game.outcome.reason,
        winner=winner.color if winner else None,
        winner_name=winner.name if winner else None,
    )
