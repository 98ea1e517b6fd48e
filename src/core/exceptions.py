"""
Exceptions shared across layers.

The domain layer raises them at the point of detection; only the shell decides what the user gets to read.
NOTE: none of them derive from ValueError, so raising one inside a pydantic validator propagates it unwrapped.
"""


class GameError(Exception):
    """Base class for everything the game (or the layers around it) raises on purpose."""


class InvalidPositionError(GameError):
    """Malformed coordinate text or a coordinate outside of the board."""


class InvalidBoardError(GameError):
    """Board string that cannot be decoded into a full board."""


class IllegalMoveError(GameError):
    """Submitted move is not in the current set of legal moves."""


class GameOverError(GameError):
    """The game already finished, no more moves accepted."""


class GameStateError(GameError):
    """Transport data cannot be turned into a consistent Game."""


class RepositoryError(GameError):
    """Game record could not be found."""


class InvalidRequestError(GameError):
    """Request model rejected its input."""


class InvalidCommandError(GameError):
    """Text typed into the shell does not match any command."""
