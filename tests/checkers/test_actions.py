"""Unit tests for /src/checkers/actions.py"""

from typing import Callable

import pytest

from src.checkers.actions import (
    JumpMoveAction,
    ResignationAction,
    SimpleMoveAction,
    create_action,
    create_jump_move_action,
    create_resignation_action,
    create_simple_move_action,
)
from src.checkers.board import Board
from src.checkers.moves import Move
from src.checkers.pieces import Piece
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import ActionKind, Color, Rank

BoardFactory = Callable[[dict[int, str]], Board]


def test_simple_move_action(starting_board: Board) -> None:
    action = create_action(starting_board, Move(9, 13))
    assert isinstance(action, SimpleMoveAction)
    assert action.kind == ActionKind.SIMPLE_MOVE
    assert action.color == Color.RED
    assert action.move == Move(9, 13)
    assert action.resultant_board.is_empty(9)
    assert action.resultant_board.piece(13) == Piece(Color.RED)
    assert action.ends_turn
    assert not action.ends_game
    assert action.winner is None


def test_action_leaves_original_board_alone(starting_board: Board) -> None:
    _ = create_action(starting_board, Move(9, 13))
    assert starting_board == Board.starting_position()


def test_simple_move_promotes(board_with_pieces: BoardFactory) -> None:
    """A red man reaching the bottom row is crowned in the very same board"""
    board = board_with_pieces({25: "r", 31: "w"})
    action = create_simple_move_action(board, Move(25, 29))
    assert action.resultant_board.piece(29) == Piece(Color.RED, Rank.KING)
    assert action.ends_turn


def test_white_man_promotes_on_top_row(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces({5: "w", 31: "r"})
    action = create_action(board, Move(5, 1))
    assert action.resultant_board.piece(1) == Piece(Color.WHITE, Rank.KING)


def test_jump_move_action(board_with_pieces: BoardFactory) -> None:
    """Capture the white man on 14. White still has a piece that can move, so the game goes on."""
    board = board_with_pieces({9: "r", 14: "w", 31: "w"})
    action = create_action(board, Move(9, 18))
    assert isinstance(action, JumpMoveAction)
    assert action.kind == ActionKind.JUMP_MOVE
    assert action.captured_index == 14
    assert action.resultant_board.occupied_squares() == {18, 31}
    assert action.resultant_board.piece(18) == Piece(Color.RED)
    assert action.ends_turn
    assert not action.ends_game


def test_jump_that_can_continue(board_with_pieces: BoardFactory) -> None:
    """After landing on 8, the red man can jump the white man on 13 as well: the turn does not end."""
    board = board_with_pieces({1: "r", 5: "w", 13: "w", 31: "w"})
    action = create_jump_move_action(board, Move(1, 8))
    assert not action.ends_turn
    assert not action.ends_game
    assert action.winner is None


def test_chain_cannot_end_the_game(board_with_pieces: BoardFactory) -> None:
    """A jump that does not end the turn never ends the game, whatever the opponent has left."""
    board = board_with_pieces({1: "r", 5: "w", 13: "w"})
    action = create_jump_move_action(board, Move(1, 8))
    assert not action.ends_turn
    assert not action.ends_game


def test_promotion_ends_the_turn(board_with_pieces: BoardFactory) -> None:
    """
    Red man on 21 jumps the white man on 25 and lands on 30, the promotion row.
    As a king it could jump the white man on 26 straight away, but crowning ends the turn.
    """
    board = board_with_pieces({21: "r", 25: "w", 26: "w"})
    action = create_jump_move_action(board, Move(21, 30))
    assert action.resultant_board.piece(30) == Piece(Color.RED, Rank.KING)
    assert action.resultant_board.is_empty(25)
    assert action.ends_turn
    assert not action.ends_game


def test_king_reaching_the_promotion_row_ends_the_turn(board_with_pieces: BoardFactory) -> None:
    """A king landing on the far row stops there too, even with the white man on 26 still in reach."""
    board = board_with_pieces({21: "R", 25: "w", 26: "w"})
    action = create_jump_move_action(board, Move(21, 30))
    assert action.resultant_board.piece(30) == Piece(Color.RED, Rank.KING)
    assert action.resultant_board.is_empty(25)
    assert action.ends_turn
    assert not action.ends_game


def test_capturing_the_last_piece_wins(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces({9: "r", 14: "w"})
    action = create_action(board, Move(9, 18))
    assert action.ends_game
    assert action.winner == Color.RED


def test_blocking_the_last_piece_wins(board_with_pieces: BoardFactory) -> None:
    """The white man in the corner has no move left once red closes the diagonal"""
    board = board_with_pieces({17: "r", 24: "r", 28: "w"})
    action = create_action(board, Move(17, 21))
    assert action.ends_game
    assert action.winner == Color.RED


@pytest.mark.parametrize(
    "move",
    [
        Move(13, 17),  # empty origin
        Move(5, 9),  # occupied destination
        Move(9, 12),  # not diagonal
        Move(9, 18),  # jump over own piece / nothing
    ],
)
def test_illegal_move_raises(starting_board: Board, move: Move) -> None:
    with pytest.raises(IllegalMoveError):
        _ = create_action(starting_board, move)


def test_factories_check_the_move_kind(board_with_pieces: BoardFactory) -> None:
    """Asking for a jump action with a simple move (or the reverse) is refused."""
    board = board_with_pieces({9: "r", 14: "w"})
    with pytest.raises(IllegalMoveError):
        _ = create_jump_move_action(board, Move(9, 13))
    with pytest.raises(IllegalMoveError):
        _ = create_simple_move_action(board, Move(9, 18))


@pytest.mark.parametrize("color", list(Color))
def test_resignation(starting_board: Board, color: Color) -> None:
    action = create_resignation_action(starting_board, color)
    assert isinstance(action, ResignationAction)
    assert action.kind == ActionKind.RESIGNATION
    assert action.move is None
    assert action.resultant_board == starting_board
    assert action.ends_turn and action.ends_game
    assert action.winner == color.opponent
