"""Implementation of (Game)Repository keeping the game logs in a dictionary"""

import logging
import threading
from uuid import UUID, uuid4

from src.checkers.game import GameLog
from src.core.exceptions import ConcurrentUpdateError, RepositoryError

_LOGGER = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Game logs stored per game ID.

    The logs themselves are immutable, so reads need no locking. Writes go through one lock, which turns
    `append_action` into an atomic compare-and-append: two moves validated against the same log can never both
    be stored.
    """

    def __init__(self) -> None:
        self._games: dict[UUID, GameLog] = {}
        self._lock = threading.Lock()

    def get_game(self, game_id: UUID) -> GameLog | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game: GameLog) -> tuple[GameLog, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        new_id = uuid4()
        with self._lock:
            self._games[new_id] = game
        return game, new_id

    def append_action(
        self, game_id: UUID, expected_length: int, game: GameLog
    ) -> GameLog:
        """
        Store the extended log.
        ---

        `expected_length` is the number of actions the caller saw when validating its move. If the stored log
        has a different length by now, another move got in first and this one is refused.
        """
        with self._lock:
            stored = self._games.get(game_id)
            if stored is None:
                raise RepositoryError(f"Game with {game_id=} not found.")

            if len(stored.actions) != expected_length:
                raise ConcurrentUpdateError(
                    f"Game {game_id} has {len(stored.actions)} actions, expected {expected_length}. "
                    "Another move was made first."
                )

            if game.actions[:expected_length] != stored.actions:
                raise ConcurrentUpdateError(
                    f"New log for game {game_id} does not extend the stored one."
                )

            self._games[game_id] = game
        _LOGGER.debug("Game %s now has %d actions", game_id, len(game.actions))
        return game

    def delete_game(self, game_id: UUID) -> GameLog | None:
        """Remove a game's record."""
        with self._lock:
            return self._games.pop(game_id, None)

    def clear(self) -> None:
        with self._lock:
            self._games.clear()
