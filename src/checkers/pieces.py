"""Defines the checkers pieces"""

from __future__ import annotations

from dataclasses import dataclass, replace

from src.core.exceptions import BoardNotationError
from src.core.shared_types import Color, Rank

# lower case: men, upper case: kings
NOTATION_TO_COLOR: dict[str, Color] = {
    "r": Color.RED,
    "w": Color.WHITE,
}

COLOR_TO_NOTATION: dict[Color, str] = {
    value: key for key, value in NOTATION_TO_COLOR.items()
}


@dataclass(frozen=True)
class Piece:
    color: Color
    rank: Rank = Rank.MAN

    @classmethod
    def from_notation(cls, character: str) -> Piece:
        if character.lower() not in NOTATION_TO_COLOR:
            raise BoardNotationError(
                f"Cannot interpret {character!r} as a piece. Use one of r, R, w, W."
            )
        color = NOTATION_TO_COLOR[character.lower()]
        rank = Rank.KING if character.isupper() else Rank.MAN
        return cls(color, rank)

    def to_notation(self) -> str:
        character = COLOR_TO_NOTATION[self.color]
        return character.upper() if self.is_king else character

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def promoted(self) -> Piece:
        """Pieces are immutable: promotion hands back a new (king) piece of the same color."""
        return replace(self, rank=Rank.KING)
