"""
Trivia API clients.

This package contains the client interface the game talks to and the
aiohttp implementation for jService-compatible APIs.
"""

from .base import BaseTriviaClient
from .jservice import JServiceClient

__all__ = [
    'BaseTriviaClient',
    'JServiceClient'
]
