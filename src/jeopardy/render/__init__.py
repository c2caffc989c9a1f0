"""
Board renderers.

The game core only talks to BoardRenderer; ConsoleRenderer draws the board
as a text grid for terminal play.
"""

from .base import BoardRenderer
from .console import ConsoleRenderer

__all__ = [
    'BoardRenderer',
    'ConsoleRenderer'
]
