"""
Game core: category selection, clue selection, clue bank and reveal state.

Nothing in this package draws anything; it hands data to a BoardRenderer
and receives clicks as clue ids.
"""

from .clue_bank import ClueBank, build_clue_bank
from .fetcher import CategoryFetcher
from .loader import load_category, normalize_category, normalize_clue
from .reveal import RevealController
from .selector import ClueSelector
from .session import GameSession, SessionStatus

__all__ = [
    'ClueBank',
    'build_clue_bank',
    'CategoryFetcher',
    'load_category',
    'normalize_category',
    'normalize_clue',
    'RevealController',
    'ClueSelector',
    'GameSession',
    'SessionStatus'
]
