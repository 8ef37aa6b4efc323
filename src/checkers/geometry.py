"""
Board geometry: pure index arithmetic over the 32 playing squares.

Only the dark squares of the 8x8 board are addressable. They are numbered 0-31, row by row from the top,
4 squares per row. Because the dark squares zigzag, even rows (0th, 2nd, ...) start one column further to the
right than odd rows:

    row 0:    .  0  .  1  .  2  .  3
    row 1:    4  .  5  .  6  .  7  .
    row 2:    .  8  .  9  . 10  . 11
    ...

So the offset to reach a diagonal neighbour depends on the parity of the row.
No board contents are involved in this module.
"""

from enum import Enum
from typing import Optional

from src.core.shared_types import Color

SQUARES_PER_ROW = 4
NUMBER_OF_ROWS = SQUARES_PER_ROW * 2
NUMBER_OF_SQUARES = SQUARES_PER_ROW * NUMBER_OF_ROWS
MAX_SQUARE_INDEX = NUMBER_OF_SQUARES - 1


class Direction(Enum):
    NW = "nw"
    NE = "ne"
    SE = "se"
    SW = "sw"


NORTH = (Direction.NW, Direction.NE)
SOUTH = (Direction.SE, Direction.SW)
WEST = (Direction.NW, Direction.SW)
EAST = (Direction.NE, Direction.SE)

# NOTE: These offsets assume the direction has been checked to stay on the board.
EVEN_ROW_OFFSETS: dict[Direction, int] = {
    Direction.NW: -4,
    Direction.NE: -3,
    Direction.SE: 5,
    Direction.SW: 4,
}

ODD_ROW_OFFSETS: dict[Direction, int] = {
    Direction.NW: -5,
    Direction.NE: -4,
    Direction.SE: 4,
    Direction.SW: 3,
}

# Men may only move towards the opponent's side of the board
FORWARD_DIRECTIONS: dict[Color, tuple[Direction, ...]] = {
    Color.RED: SOUTH,
    Color.WHITE: NORTH,
}


def row_of(index: int) -> int:
    return index // SQUARES_PER_ROW


def is_in_even_row(index: int) -> bool:
    """Parity is zero-indexed (even rows are 0th, 2nd, 4th, etc.)"""
    return row_of(index) % 2 == 0


def is_in_bounds(index: int) -> bool:
    return 0 <= index <= MAX_SQUARE_INDEX


def direction_in_bounds(origin: int, direction: Direction) -> bool:
    """
    Does one diagonal step in the given direction stay on the board?

    * North is blocked in the top row, south in the bottom row.
    * West is blocked in the leftmost column, which only odd rows touch.
    * East is blocked in the rightmost column, which only even rows touch.
    """
    if direction in NORTH and row_of(origin) == 0:
        return False

    if direction in SOUTH and row_of(origin) == NUMBER_OF_ROWS - 1:
        return False

    even_row = is_in_even_row(origin)
    if direction in WEST and not even_row and origin % SQUARES_PER_ROW == 0:
        return False

    if direction in EAST and even_row and (origin + 1) % SQUARES_PER_ROW == 0:
        return False

    return True


def adjacent_index(origin: int, direction: Direction) -> Optional[int]:
    """The diagonal neighbour of a square, or None if that would be off the board."""
    if not direction_in_bounds(origin, direction):
        return None
    offsets = EVEN_ROW_OFFSETS if is_in_even_row(origin) else ODD_ROW_OFFSETS
    return origin + offsets[direction]


def jump_index(origin: int, direction: Direction) -> Optional[int]:
    """Landing square of a jump: two diagonal steps in the same direction."""
    jumped = adjacent_index(origin, direction)
    if jumped is None:
        return None
    return adjacent_index(jumped, direction)


def is_in_promotion_row(index: int, color: Color) -> bool:
    """The row furthest away from a color's starting side. Red starts at the top, so it promotes on the bottom row."""
    promotion_row = NUMBER_OF_ROWS - 1 if color == Color.RED else 0
    return is_in_bounds(index) and row_of(index) == promotion_row


def is_forward(direction: Direction, color: Color) -> bool:
    return direction in FORWARD_DIRECTIONS[color]
