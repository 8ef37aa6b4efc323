"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest

from src.checkers.board import Board
from src.checkers.game import GameLog
from src.checkers.pieces import Piece
from src.db.memory_repository import InMemoryGameRepository


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


@pytest.fixture
def new_game() -> GameLog:
    return GameLog.new()


@pytest.fixture
def board_with_pieces() -> Callable[[dict[int, str]], Board]:
    """Call the inner function with {square index: piece character}, ex. {9: "r", 14: "W"}"""

    def _create_board(pieces: dict[int, str]) -> Board:
        board = Board.empty()
        for index, character in pieces.items():
            board = board.place_piece(Piece.from_notation(character), index)
        return board

    return _create_board


@pytest.fixture
def repository() -> Iterator[InMemoryGameRepository]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
