"""
The game log is the entrypoint into the domain layer for the service layer.

A game is nothing more than the initial board plus the append-only sequence of actions applied to it.
Everything else (current board, whose turn it is, is the game over, which moves are legal now) is derived from
that sequence on demand, so there is no second copy of the state that could drift away from the log.

All functions here are pure: applying a move returns a NEW log value, the old one stays valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.checkers.actions import (
    JumpMoveAction,
    MoveAction,
    PlayerAction,
    create_action,
    create_resignation_action,
)
from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    all_jump_moves,
    illegality_reason,
    mandatory_moves,
)
from src.core.config import STARTING_COLOR
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Color

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameLog:
    initial_board: Board
    actions: tuple[PlayerAction, ...] = ()
    starting_color: Color = STARTING_COLOR

    @classmethod
    def new(
        cls,
        initial_board: Optional[Board] = None,
        starting_color: Color = STARTING_COLOR,
    ) -> GameLog:
        """Start a game. Without a board, the standard setup is used."""
        board = initial_board if initial_board is not None else Board.starting_position()
        return cls(initial_board=board, starting_color=starting_color)

    def append(self, action: PlayerAction) -> GameLog:
        return GameLog(
            initial_board=self.initial_board,
            actions=self.actions + (action,),
            starting_color=self.starting_color,
        )


# --- RESULT OF APPLYING A MOVE ---
@dataclass(frozen=True)
class Accepted:
    log: GameLog
    action: PlayerAction

    def unwrap(self) -> GameLog:
        return self.log


@dataclass(frozen=True)
class Rejected:
    """The log is returned exactly as it was handed in."""

    log: GameLog
    error: IllegalMoveError

    def unwrap(self) -> GameLog:
        raise self.error


MoveOutcome = Union[Accepted, Rejected]


@dataclass(frozen=True)
class LegalAction:
    """A move the player on turn may make, together with the action it would produce."""

    move: Move
    preview: MoveAction


# --- DERIVED QUERIES ---
def last_action(log: GameLog) -> Optional[PlayerAction]:
    return log.actions[-1] if log.actions else None


def current_board(log: GameLog) -> Board:
    action = last_action(log)
    return action.resultant_board if action is not None else log.initial_board


def whose_turn(log: GameLog) -> Optional[Color]:
    """
    * No actions yet: the starting color.
    * Game ended: nobody.
    * Last action ended the turn: the other color.
    * Otherwise a multi-jump is in progress and the same color is still on turn.
    """
    action = last_action(log)
    if action is None:
        return log.starting_color
    if action.ends_game:
        return None
    if action.ends_turn:
        return action.color.opponent
    return action.color


def game_over(log: GameLog) -> bool:
    action = last_action(log)
    return action is not None and action.ends_game


def winner(log: GameLog) -> Optional[Color]:
    action = last_action(log)
    return action.winner if action is not None else None


def continuation_square(log: GameLog) -> Optional[int]:
    """Square of the piece that must keep jumping, if the previous jump did not end the turn."""
    action = last_action(log)
    if isinstance(action, JumpMoveAction) and not action.ends_turn:
        return action.move.to_index
    return None


def legal_moves(log: GameLog) -> list[Move]:
    """
    Moves the player on turn may make right now.
    ----

    1. Nobody on turn (game over)? No moves.
    2. In the middle of a multi-jump? Only further jumps by that same piece.
    3. Otherwise: jumps if there are any (captures are compulsory), else simple moves.
    """
    color = whose_turn(log)
    if color is None:
        return []

    board = current_board(log)
    chain_square = continuation_square(log)
    if chain_square is not None:
        return [
            move for move in all_jump_moves(board, color) if move.from_index == chain_square
        ]
    return mandatory_moves(board, color)


def legal_actions(log: GameLog) -> list[LegalAction]:
    """Legal moves plus a preview of the resulting action, for a caller that wants to render the outcome."""
    board = current_board(log)
    return [LegalAction(move, create_action(board, move)) for move in legal_moves(log)]


def capture_count(log: GameLog, color: Color) -> int:
    """Number of pieces a color has captured so far (every jump captures exactly one)."""
    return sum(
        1
        for action in log.actions
        if isinstance(action, JumpMoveAction) and action.color == color
    )


# --- COMMANDS ---
def apply_move(log: GameLog, move: Move) -> MoveOutcome:
    """
    Attempt to make a move
    -----

    1. make sure the game is still going
    2. make sure the move is one of the legal moves right now (local rules, turn, mandatory jump, multi-jump)
    3. create the action and append it to a new log

    An illegal move gives back a Rejected outcome holding the untouched log.
    """
    if game_over(log):
        return _reject(log, IllegalMoveError(f"Move not allowed: {move.to_notation()} (the game is over)"))

    if move not in legal_moves(log):
        reason = _rejection_reason(log, move)
        return _reject(log, IllegalMoveError(f"Move not allowed: {move.to_notation()} ({reason})"))

    action = create_action(current_board(log), move)
    _LOGGER.debug(
        "%s plays %s (%s), ends turn: %s", action.color, move.to_notation(), action.kind, action.ends_turn
    )
    if action.ends_game:
        _LOGGER.info("Game over after %s: %s wins", move.to_notation(), action.winner)
    return Accepted(log.append(action), action)


def resign(log: GameLog, color: Color) -> MoveOutcome:
    """Either player may resign at any moment while the game is still going (even in the middle of a multi-jump)."""
    if game_over(log):
        return _reject(log, IllegalMoveError(f"{color} cannot resign: the game is over"))

    action = create_resignation_action(current_board(log), color)
    _LOGGER.info("%s resigns, %s wins", color, action.winner)
    return Accepted(log.append(action), action)


# -- PRIVATE HELPERS ---
def _reject(log: GameLog, error: IllegalMoveError) -> Rejected:
    _LOGGER.debug("Rejected: %s", error)
    return Rejected(log, error)


def _rejection_reason(log: GameLog, move: Move) -> str:
    """Explain why a move is not among the legal moves. Only called for moves that were rejected."""
    board = current_board(log)
    local_reason = illegality_reason(board, move)
    if local_reason is not None:
        return local_reason

    color = whose_turn(log)
    piece = board.piece(move.from_index)
    assert piece is not None
    if piece.color != color:
        return f"it is {color}'s turn"

    chain_square = continuation_square(log)
    if chain_square is not None:
        return f"the piece on square {chain_square} must continue jumping"

    return "a jump is available, capturing is mandatory"
