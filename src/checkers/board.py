"""The board snapshot: which piece (if any) stands on each of the 32 playing squares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from src.checkers.geometry import NUMBER_OF_ROWS, NUMBER_OF_SQUARES, SQUARES_PER_ROW
from src.checkers.pieces import Piece
from src.core.exceptions import BoardNotationError
from src.core.shared_types import Color

STARTING_POSITION = "rrrr/rrrr/rrrr/4/4/wwww/wwww/wwww"
EMPTY_POSITION = "/".join(["4"] * NUMBER_OF_ROWS)

Square = Optional[Piece]


@dataclass(frozen=True)
class Board:
    """
    Immutable snapshot of the playing squares.

    Any change (moving, removing, placing a piece) returns a new Board, so a snapshot stored in the game log
    can never be altered by a later move.
    """

    squares: tuple[Square, ...]

    def __post_init__(self) -> None:
        if len(self.squares) != NUMBER_OF_SQUARES:
            raise BoardNotationError(
                f"A board has exactly {NUMBER_OF_SQUARES} playing squares, got {len(self.squares)}."
            )

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> Board:
        return cls(tuple(squares))

    @classmethod
    def empty(cls) -> Board:
        return cls((None,) * NUMBER_OF_SQUARES)

    @classmethod
    def starting_position(cls) -> Board:
        """12 red men on the top three rows, 12 white men on the bottom three rows."""
        return cls.from_notation(STARTING_POSITION)

    @classmethod
    def from_notation(cls, notation: str) -> Board:
        """Construct a board from its text notation.

        Rows are separated by slashes and read from the top row (index 0-3) to the bottom row (index 28-31).
        ex. standard starting position:
        rrrr/rrrr/rrrr/4/4/wwww/wwww/wwww
        means:
        * red men on squares 0-11
        * rows 3 and 4 have 4 consecutive empty squares
        * white men on squares 20-31
        Capital letters (R, W) are kings. A digit denotes that many empty squares in a row.
        """
        rows = notation.strip().split("/")
        if len(rows) != NUMBER_OF_ROWS:
            raise BoardNotationError(
                f"Board notation needs {NUMBER_OF_ROWS} rows separated by '/', got {len(rows)}: {notation!r}"
            )

        squares: list[Square] = []
        for row in rows:
            row_squares: list[Square] = []
            for character in row:
                if character.isdigit():
                    row_squares.extend([None] * int(character))
                else:
                    row_squares.append(Piece.from_notation(character))
            if len(row_squares) != SQUARES_PER_ROW:
                raise BoardNotationError(
                    f"Every row should describe {SQUARES_PER_ROW} squares. Row {row!r} describes {len(row_squares)}."
                )
            squares.extend(row_squares)
        return cls(tuple(squares))

    def to_notation(self) -> str:
        return "/".join(
            self._row_to_notation(row) for row in range(NUMBER_OF_ROWS)
        )

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        start = row * SQUARES_PER_ROW
        for piece in self.squares[start : start + SQUARES_PER_ROW]:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_notation())

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def piece(self, index: int) -> Square:
        return self.squares[index]

    def is_empty(self, index: int) -> bool:
        return self.squares[index] is None

    def locate_color(self, color: Color) -> list[int]:
        return [
            index
            for index, piece in enumerate(self.squares)
            if piece is not None and piece.color == color
        ]

    def occupied_squares(self) -> set[int]:
        return {index for index, piece in enumerate(self.squares) if piece is not None}

    def count_pieces(self) -> dict[Color, int]:
        return {color: len(self.locate_color(color)) for color in Color}

    # -- copies with changes --
    def with_pieces(self, changes: dict[int, Square]) -> Board:
        """New board with the given squares replaced (None empties a square)."""
        squares = list(self.squares)
        for index, piece in changes.items():
            squares[index] = piece
        return Board(tuple(squares))

    def place_piece(self, piece: Piece, index: int) -> Board:
        return self.with_pieces({index: piece})

    def remove_piece(self, index: int) -> Board:
        return self.with_pieces({index: None})
