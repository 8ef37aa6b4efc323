"""
Custom exceptions, shared by all layers.

Everything derives from GameError, so the service/API layer can catch a single base class.
"""


class GameError(Exception):
    """Base class of all errors raised on purpose by this application."""


class IllegalMoveError(GameError):
    """The move (or resignation) cannot be applied to the game in its current state."""


class BoardNotationError(GameError):
    """A board could not be built from the given notation / squares."""


class GameStateError(IllegalMoveError):
    """Move request refused because of the state of the game (finished, or the other color is on turn)."""


class NotYourTurnError(GameStateError):
    """A player tried to act while the other color is on turn."""


class RepositoryError(GameError):
    """Could not find (or store) the requested game."""


class ConcurrentUpdateError(RepositoryError):
    """Another move was appended to the game log first."""


class InvalidRequestError(GameError):
    """Raised by the validators of the request models."""
