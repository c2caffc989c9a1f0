"""
Jeopardy Board Package

A single-player trivia board: six random categories from a jService-style
API, five clues each, revealed question first and answer second.
"""

__version__ = "1.0.0"

from .api import JServiceClient
from .exceptions import (
    ConsistencyError, GameAssemblyError, GameNotReadyError, JeopardyError,
    NetworkError, NotFoundError, SourceExhaustedError, ValidationError
)
from .game import GameSession
from .models import Category, Clue, RevealState
from .render import BoardRenderer, ConsoleRenderer

__all__ = [
    'JServiceClient',
    'GameSession',
    'BoardRenderer',
    'ConsoleRenderer',
    'Category',
    'Clue',
    'RevealState',
    'JeopardyError',
    'NetworkError',
    'NotFoundError',
    'ValidationError',
    'GameAssemblyError',
    'SourceExhaustedError',
    'ConsistencyError',
    'GameNotReadyError'
]
