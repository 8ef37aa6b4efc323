"""
Move legality and move generation.

Key idea: a move only stores its origin and destination. Whether it is a simple move or a jump, and in which
direction it goes, is derived from the geometry. Candidate targets per move kind are looked up in MOVE_TARGETS
(strategy pattern), then filtered through `is_legal`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional

from src.checkers.board import Board
from src.checkers.geometry import (
    Direction,
    adjacent_index,
    is_forward,
    is_in_bounds,
    jump_index,
)
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Color

_LOGGER = logging.getLogger(__name__)


class MoveKind(StrEnum):
    """The action kinds that move a piece (a resignation is not a move)."""

    SIMPLE_MOVE = "simple move"
    JUMP_MOVE = "jump move"


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_index: int
    to_index: int

    @classmethod
    def from_notation(cls, notation: str) -> Move:
        """
        Moves are written as "<from>-<to>" using the (0-based) playing square indices.

        examples:
        * "9-13": simple move from square 9 to square 13
        * "9-18": jump from square 9, over square 14, to square 18
        """
        parts = notation.strip().split("-")
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            raise IllegalMoveError(f"Cannot interpret {notation!r} as a move.")
        return cls(int(parts[0]), int(parts[1]))

    def to_notation(self) -> str:
        return f"{self.from_index}-{self.to_index}"


@dataclass(frozen=True)
class MoveGeometry:
    kind: MoveKind
    direction: Direction


# -- STRATEGY PATTERN: TARGET SQUARE PER MOVE KIND --
TargetFn = Callable[[int, Direction], Optional[int]]
MOVE_TARGETS: dict[MoveKind, TargetFn] = {
    MoveKind.SIMPLE_MOVE: adjacent_index,
    MoveKind.JUMP_MOVE: jump_index,
}


def classify(move: Move) -> Optional[MoveGeometry]:
    """
    Find out what kind of move this is, purely from the indices.

    Returns None if the destination is neither a diagonal neighbour nor a jump target of the origin
    (covers non-diagonal moves, wrong distances and targets off the board).
    """
    for kind, target_fn in MOVE_TARGETS.items():
        for direction in Direction:
            if target_fn(move.from_index, direction) == move.to_index:
                return MoveGeometry(kind, direction)
    return None


def jumped_index(move: Move) -> Optional[int]:
    """The square a jump passes over. None if the move is not a jump."""
    geometry = classify(move)
    if geometry is None or geometry.kind != MoveKind.JUMP_MOVE:
        return None
    return adjacent_index(move.from_index, geometry.direction)


def illegality_reason(board: Board, move: Move) -> Optional[str]:
    """
    Check the move against the local rules. Returns None if the move is legal, or a short explanation otherwise.

    1. There must be a piece on the origin, and the destination must be empty.
    2. The destination must be one diagonal step or one diagonal jump away.
    3. Men only move forward (for simple moves and jumps alike). Kings go any direction.
    4. A jump must pass over a piece of the opponent.
    """
    if not (is_in_bounds(move.from_index) and is_in_bounds(move.to_index)):
        return f"square index out of range in {move.to_notation()}"

    moving_piece = board.piece(move.from_index)
    if moving_piece is None:
        return f"no piece on square {move.from_index}"

    if not board.is_empty(move.to_index):
        return f"square {move.to_index} is occupied"

    geometry = classify(move)
    if geometry is None:
        return f"{move.to_notation()} is neither a diagonal step nor a jump"

    if not moving_piece.is_king and not is_forward(geometry.direction, moving_piece.color):
        return f"a man cannot move {geometry.direction.value}"

    if geometry.kind == MoveKind.JUMP_MOVE:
        # A jump target exists, so the square in between is on the board too
        jumped = adjacent_index(move.from_index, geometry.direction)
        assert jumped is not None
        jumped_piece = board.piece(jumped)
        if jumped_piece is None or jumped_piece.color == moving_piece.color:
            return f"no opponent piece to capture on square {jumped}"

    return None


def is_legal(board: Board, move: Move) -> bool:
    """Only local geometry and occupancy are considered (no board-wide rules like mandatory jumps)."""
    return illegality_reason(board, move) is None


# --- MOVE GENERATION ---
def candidate_moves(origin: int, kind: MoveKind) -> list[Move]:
    """Every move of the given kind that stays on the board, ignoring what stands where."""
    target_fn = MOVE_TARGETS[kind]
    moves: list[Move] = []
    for direction in Direction:
        target = target_fn(origin, direction)
        if target is not None:
            moves.append(Move(origin, target))
    return moves


def _all_legal_moves(board: Board, color: Color, kind: MoveKind) -> list[Move]:
    return [
        move
        for origin in board.locate_color(color)
        for move in candidate_moves(origin, kind)
        if is_legal(board, move)
    ]


def all_simple_moves(board: Board, color: Color) -> list[Move]:
    return _all_legal_moves(board, color, MoveKind.SIMPLE_MOVE)


def all_jump_moves(board: Board, color: Color) -> list[Move]:
    return _all_legal_moves(board, color, MoveKind.JUMP_MOVE)


def all_moves(board: Board, color: Color) -> list[Move]:
    """Jumps and simple moves together. Mandatory jumps are NOT applied here (see the game log for that)."""
    return all_jump_moves(board, color) + all_simple_moves(board, color)


def has_any_move(board: Board, color: Color) -> bool:
    return bool(all_moves(board, color))


def mandatory_moves(board: Board, color: Color) -> list[Move]:
    """
    Captures are compulsory: when any jump is available, simple moves are not offered at all.
    """
    jumps = all_jump_moves(board, color)
    if jumps:
        _LOGGER.debug("%s must jump: %d jump(s) available", color, len(jumps))
        return jumps
    return all_simple_moves(board, color)
