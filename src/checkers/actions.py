"""
Action factory: turns a validated move into the record that gets appended to the game log.

An action is created exactly once, at the time it is applied, and never changes afterwards. It stores the
complete board that results from it plus the flags the turn resolver needs (does the turn end, does the game end,
who won).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from src.checkers.board import Board
from src.checkers.geometry import is_in_promotion_row
from src.checkers.moves import (
    Move,
    MoveKind,
    all_jump_moves,
    classify,
    has_any_move,
    illegality_reason,
    jumped_index,
)
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import ActionKind, Color

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseAction:
    color: Color
    resultant_board: Board
    ends_turn: bool
    ends_game: bool
    winner: Optional[Color]


@dataclass(frozen=True)
class SimpleMoveAction(BaseAction):
    kind: ClassVar[ActionKind] = ActionKind.SIMPLE_MOVE
    move: Move


@dataclass(frozen=True)
class JumpMoveAction(BaseAction):
    kind: ClassVar[ActionKind] = ActionKind.JUMP_MOVE
    move: Move
    captured_index: int


@dataclass(frozen=True)
class ResignationAction(BaseAction):
    kind: ClassVar[ActionKind] = ActionKind.RESIGNATION
    move: ClassVar[None] = None


MoveAction = Union[SimpleMoveAction, JumpMoveAction]
PlayerAction = Union[SimpleMoveAction, JumpMoveAction, ResignationAction]


def create_action(board: Board, move: Move) -> MoveAction:
    """Create the action for any (legal) move. Raises IllegalMoveError otherwise."""
    geometry = classify(move)
    if geometry is not None and geometry.kind == MoveKind.JUMP_MOVE:
        return create_jump_move_action(board, move)
    return create_simple_move_action(board, move)


def create_simple_move_action(board: Board, move: Move) -> SimpleMoveAction:
    """
    A simple move never chains, so it always ends the turn.
    The game ends when the opponent is left without a single legal move.
    """
    _assert_legal(board, move, MoveKind.SIMPLE_MOVE)
    piece = board.piece(move.from_index)
    assert piece is not None

    landed_piece = (
        piece.promoted() if is_in_promotion_row(move.to_index, piece.color) else piece
    )
    resultant_board = board.with_pieces({move.from_index: None, move.to_index: landed_piece})

    ends_game = not has_any_move(resultant_board, piece.color.opponent)
    return SimpleMoveAction(
        color=piece.color,
        resultant_board=resultant_board,
        ends_turn=True,
        ends_game=ends_game,
        winner=piece.color if ends_game else None,
        move=move,
    )


def create_jump_move_action(board: Board, move: Move) -> JumpMoveAction:
    """
    Move the piece, remove the captured piece.
    ---
    The turn continues (multi-jump) if the same piece can jump again from where it landed.
    Exception: landing on the promotion row always ends the turn, even if the piece could jump on from there.
    """
    _assert_legal(board, move, MoveKind.JUMP_MOVE)
    piece = board.piece(move.from_index)
    captured = jumped_index(move)
    assert piece is not None and captured is not None

    is_promotion = is_in_promotion_row(move.to_index, piece.color)
    landed_piece = piece.promoted() if is_promotion else piece
    resultant_board = board.with_pieces(
        {move.from_index: None, captured: None, move.to_index: landed_piece}
    )

    next_jumps = [
        next_jump
        for next_jump in all_jump_moves(resultant_board, piece.color)
        if next_jump.from_index == move.to_index
    ]
    ends_turn = is_promotion or not next_jumps

    # A chain that continues can never end the game
    ends_game = ends_turn and not has_any_move(resultant_board, piece.color.opponent)
    if not ends_turn:
        _LOGGER.debug(
            "%s continues jumping from %d (%d option(s))",
            piece.color,
            move.to_index,
            len(next_jumps),
        )

    return JumpMoveAction(
        color=piece.color,
        resultant_board=resultant_board,
        ends_turn=ends_turn,
        ends_game=ends_game,
        winner=piece.color if ends_game else None,
        move=move,
        captured_index=captured,
    )


def create_resignation_action(board: Board, color: Color) -> ResignationAction:
    """Giving up hands the game to the opponent. The board stays as it is."""
    return ResignationAction(
        color=color,
        resultant_board=board,
        ends_turn=True,
        ends_game=True,
        winner=color.opponent,
    )


def _assert_legal(board: Board, move: Move, kind: MoveKind) -> None:
    """Never produce a partial / inconsistent board: refuse the move before touching anything."""
    reason = illegality_reason(board, move)
    if reason is None:
        geometry = classify(move)
        assert geometry is not None
        if geometry.kind != kind:
            reason = f"{move.to_notation()} is not a {kind}"
    if reason is not None:
        raise IllegalMoveError(f"Move not allowed: {move.to_notation()} ({reason})")
