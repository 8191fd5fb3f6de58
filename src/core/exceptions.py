"""Exceptions shared by all layers. The API layer decides how each of them is reported back to a client."""


class GameError(Exception):
    """Base class for anything that goes wrong while handling a game."""


class InvalidMoveError(GameError):
    """Target square is occupied, captures nothing, or the game is already over.

    Expected during normal play: the caller ignores the input and the game state stays unchanged.
    """


class BoundsError(GameError):
    """Square lies outside of the board."""


class GameStateError(GameError):
    """Stored game data cannot be turned back into a Game."""


class InvalidNotationError(GameError):
    """Board notation string is malformed."""


class InvalidRequestError(GameError):
    """Request data failed validation."""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested game."""
