"""
Utility modules for the Jeopardy board.

This package contains utility classes and functions for:
- Clue text cleaning
- Board validation
- Rate limiting
"""

from .text_processor import TextProcessor, clean_clue_text, clean_title
from .rate_limiter import RateLimiter
from .validation import BoardValidator, validate_board

__all__ = [
    'TextProcessor',
    'RateLimiter',
    'BoardValidator',
    'clean_clue_text',
    'clean_title',
    'validate_board'
]
