"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.checkers.board import Board
from src.checkers.geometry import MAX_SQUARE_INDEX, is_in_bounds
from src.core.exceptions import BoardNotationError, InvalidRequestError
from src.core.shared_types import ActionKind, Color, Rank

PieceColor = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_position: Optional[str] = None
    starting_color: Color = Color.RED

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        try:
            Board.from_notation(value)
        except BoardNotationError as error:
            raise InvalidRequestError(f"Invalid starting position: {error}") from error
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    color: Color
    from_index: int
    to_index: int
    # Number of actions the client saw. Leave out to move against whatever the latest state is.
    expected_action_count: Optional[int] = None

    @field_validator(*["from_index", "to_index"])
    @classmethod
    def validate_square(cls, value: int) -> int:
        if not is_in_bounds(value):
            raise InvalidRequestError(
                f"Square index {value} is not a playing square. Use 0-{MAX_SQUARE_INDEX}."
            )
        return value

    @field_validator("expected_action_count")
    @classmethod
    def validate_action_count(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(f"Action count cannot be negative: {value}")
        return value


class ResignRequest(BaseModel):
    game_id: UUID
    color: Color


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    color: Color
    rank: Rank


class ActionResponse(BaseModel):
    color: Color
    kind: ActionKind
    move: Optional[str]
    ends_turn: bool
    ends_game: bool
    winner: Optional[Color]


class GameResponse(BaseModel):
    game_id: UUID
    board: str
    squares: list[Optional[PieceResponse]]
    diagram: str
    whose_turn: Optional[Color]
    game_over: bool
    winner: Optional[Color]
    action_count: int
    move_history: list[str]
    captures: dict[PieceColor, int]


class LegalMoveResponse(BaseModel):
    move: str
    from_index: int
    to_index: int
    preview: ActionResponse


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Optional[Color]
    action_count: int
    legal_moves: list[LegalMoveResponse]
