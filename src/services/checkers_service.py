"""Orchestration of communication from API models to the rules engine and the session store (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ActionResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMoveResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    PieceResponse,
    ResignRequest,
)
from src.checkers.actions import PlayerAction
from src.checkers.board import Board
from src.checkers.game import (
    GameLog,
    MoveOutcome,
    Rejected,
    apply_move,
    capture_count,
    current_board,
    game_over,
    legal_actions,
    resign,
    whose_turn,
    winner,
)
from src.checkers.moves import Move
from src.checkers.physical import render_board
from src.core.exceptions import GameStateError, NotYourTurnError, RepositoryError
from src.core.shared_types import Color
from src.db.repository import GameRepository

_LOGGER = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- request handling ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game, from the standard setup unless a starting position is given."""
        initial_board = (
            Board.from_notation(request.starting_position)
            if request.starting_position
            else None
        )
        new_game = GameLog.new(initial_board, starting_color=request.starting_color)

        stored_game, game_id = self.repo.create_game(new_game)
        _LOGGER.info("Created game %s, %s to move", game_id, request.starting_color)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to check when it is the player's turn for instance.
        """
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """The moves the player on turn can choose from, each with a preview of its outcome."""
        game = self._fetch_game(request.game_id)
        return LegalMovesResponse(
            game_id=request.game_id,
            color=whose_turn(game),
            action_count=len(game.actions),
            legal_moves=[
                LegalMoveResponse(
                    move=legal.move.to_notation(),
                    from_index=legal.move.from_index,
                    to_index=legal.move.to_index,
                    preview=self._create_action_response(legal.preview),
                )
                for legal in legal_actions(game)
            ],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        1. fetch the log and check it is this color's turn
        2. let the rules engine validate and apply the move
        3. store the new log, unless another move was stored in the meantime
        """
        game = self._fetch_game(request.game_id)
        expected_length = (
            request.expected_action_count
            if request.expected_action_count is not None
            else len(game.actions)
        )
        self._assert_your_turn(game, request.color)

        move = Move(request.from_index, request.to_index)
        outcome = apply_move(game, move)
        self._log_rejection(request.game_id, outcome)
        after_move = outcome.unwrap()

        self.repo.append_action(request.game_id, expected_length, after_move)
        return self._create_game_response(request.game_id, after_move)

    def resign(self, request: ResignRequest) -> GameResponse:
        """A player gives up. Allowed at any time while the game is in progress."""
        game = self._fetch_game(request.game_id)
        outcome = resign(game, request.color)
        self._log_rejection(request.game_id, outcome)
        after_resignation = outcome.unwrap()

        self.repo.append_action(request.game_id, len(game.actions), after_resignation)
        return self._create_game_response(request.game_id, after_resignation)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _assert_your_turn(self, game: GameLog, color: Color) -> None:
        if game_over(game):
            raise GameStateError(f"Game is over. Winner: {winner(game)}")

        color_to_move = whose_turn(game)
        if color != color_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {color_to_move} to make a move first."
            )

    def _log_rejection(self, game_id: UUID, outcome: MoveOutcome) -> None:
        if isinstance(outcome, Rejected):
            _LOGGER.warning("Game %s: %s", game_id, outcome.error)

    def _create_game_response(self, game_id: UUID, game: GameLog) -> GameResponse:
        """Convert the game log to a GameResponse (for game with given ID.)"""
        board = current_board(game)
        return GameResponse(
            game_id=game_id,
            board=board.to_notation(),
            squares=[
                PieceResponse(color=piece.color, rank=piece.rank) if piece else None
                for piece in board.squares
            ],
            diagram=render_board(board),
            whose_turn=whose_turn(game),
            game_over=game_over(game),
            winner=winner(game),
            action_count=len(game.actions),
            move_history=[
                action.move.to_notation()
                for action in game.actions
                if action.move is not None
            ],
            captures={color: capture_count(game, color) for color in Color},
        )

    def _create_action_response(self, action: PlayerAction) -> ActionResponse:
        return ActionResponse(
            color=action.color,
            kind=action.kind,
            move=action.move.to_notation() if action.move is not None else None,
            ends_turn=action.ends_turn,
            ends_game=action.ends_game,
            winner=action.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameLog:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
