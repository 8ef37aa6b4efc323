"""
Translation between playing square indices and the physical 8x8 grid, for whoever draws the board.

Not used by the rules themselves. Even rows have their playing squares on the odd columns, odd rows on the
even columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.checkers.board import Board
from src.checkers.geometry import (
    NUMBER_OF_ROWS,
    SQUARES_PER_ROW,
    is_in_bounds,
    is_in_even_row,
    row_of,
)
from src.checkers.pieces import Piece

EMPTY_SYMBOL = "."
LIGHT_SQUARE_SYMBOL = " "


@dataclass(frozen=True)
class PhysicalLocation:
    row: int
    column: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < NUMBER_OF_ROWS) and (0 <= self.column < NUMBER_OF_ROWS)


@dataclass(frozen=True)
class PhysicalSquare:
    index: int
    piece: Optional[Piece]


PhysicalBoard = list[list[Optional[PhysicalSquare]]]


def to_physical(index: int) -> Optional[PhysicalLocation]:
    if not is_in_bounds(index):
        return None
    offset = 1 if is_in_even_row(index) else 0
    column = (index % SQUARES_PER_ROW) * 2 + offset
    return PhysicalLocation(row_of(index), column)


def from_physical(location: PhysicalLocation) -> Optional[int]:
    """The light squares (and anything off the board) have no index."""
    if not location.is_within_bounds():
        return None
    is_playing_square = (location.row + location.column) % 2 == 1
    if not is_playing_square:
        return None
    return location.row * SQUARES_PER_ROW + location.column // 2


def physical_board(board: Board) -> PhysicalBoard:
    """The full grid, row by row from the top. Light squares are None."""
    grid: PhysicalBoard = []
    for row in range(NUMBER_OF_ROWS):
        grid_row: list[Optional[PhysicalSquare]] = []
        for column in range(NUMBER_OF_ROWS):
            index = from_physical(PhysicalLocation(row, column))
            grid_row.append(
                PhysicalSquare(index, board.piece(index)) if index is not None else None
            )
        grid.append(grid_row)
    return grid


def render_board(board: Board) -> str:
    """Plain text diagram of the board (one line per row), handy for logs and API responses."""
    lines: list[str] = []
    for grid_row in physical_board(board):
        symbols = [
            LIGHT_SQUARE_SYMBOL
            if square is None
            else (square.piece.to_notation() if square.piece else EMPTY_SYMBOL)
            for square in grid_row
        ]
        lines.append(" ".join(symbols))
    return "\n".join(lines)
