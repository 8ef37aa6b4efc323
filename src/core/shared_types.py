"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    RED = "red"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self == Color.RED else Color.RED


class Rank(StrEnum):
    MAN = "man"
    KING = "king"


class ActionKind(StrEnum):
    SIMPLE_MOVE = "simple move"
    JUMP_MOVE = "jump move"
    RESIGNATION = "resignation"
