"""Protocol repository (sessions are kept in memory for now; a persistent store can implement the same protocol)"""

from typing import Protocol
from uuid import UUID

from src.checkers.game import GameLog


class GameRepository(Protocol):
    """Session store orchestration"""

    def get_game(self, game_id: UUID) -> GameLog | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameLog) -> tuple[GameLog, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def append_action(
        self, game_id: UUID, expected_length: int, game: GameLog
    ) -> GameLog:
        """Replace the stored log with the extended one, but only if nobody appended in the meantime."""
        ...

    def delete_game(self, game_id: UUID) -> GameLog | None:
        """Remove a game's record."""
        ...
