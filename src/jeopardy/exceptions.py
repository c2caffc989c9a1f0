"""
Exception hierarchy for the Jeopardy board.

Every error the game raises derives from JeopardyError so callers can
surface a single "failed to load game" path while still telling
network problems apart from bad data and internal desyncs.
"""

from typing import Optional


class JeopardyError(Exception):
    """Base class for all game errors."""


class NetworkError(JeopardyError):
    """The trivia API was unreachable, timed out, or answered with a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.url = url


class NotFoundError(NetworkError):
    """The requested category does not exist."""


class ValidationError(JeopardyError):
    """Clue data is malformed or insufficient to fill the board."""


class GameAssemblyError(ValidationError):
    """A bounded selection loop gave up before the board could be assembled."""


class SourceExhaustedError(GameAssemblyError):
    """The trivia source stopped yielding new categories within the retry limit."""


class ConsistencyError(JeopardyError):
    """The rendered board and the clue bank disagree about a clue id."""


class GameNotReadyError(JeopardyError):
    """A reveal was requested while no game is loaded."""
