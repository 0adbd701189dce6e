"""Exceptions raised by the game engine."""


class GameError(Exception):
    """Base class for engine errors."""


class CapacityExceeded(GameError):
    """Raised when registering a player on a board that already has six."""


class DuplicatePlayer(GameError):
    """Raised when a player name is registered twice."""


class UnknownPlayer(GameError):
    """Raised when a player name is not registered in the game."""


class UnknownPosition(GameError):
    """Raised when a point has no node on the board.

    Callers only ever pass points they obtained from the board itself, so
    this always signals a broken invariant in the caller.
    """
