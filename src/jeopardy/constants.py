"""
Constants and default configuration values for the Jeopardy board.

This module centralizes the board dimensions, retry bounds, API defaults
and file paths so that the game and the client agree on them.
"""

# Board Shape Constants
NUM_CATEGORIES = 6
CLUES_PER_CATEGORY = 5
VALUE_STEP = 100

# Trivia API Constants
BASE_URL = 'https://jservice.io/'
MAX_CATEGORY_OFFSET = 18000

ENDPOINTS = {
    'random_category': 'api/categories',
    'category': 'api/category'
}

# Retry Bounds
RETRY_LIMITS = {
    'max_category_attempts': 60,
    'max_clue_attempts': 500,
    'http_attempts': 3,
    'http_wait_min': 1,
    'http_wait_max': 8
}

# Timeouts (seconds)
TIMEOUTS = {
    'request': 10,
    'setup': 60
}

RATE_LIMITS = {
    'requests_per_minute': 120
}

# Text Processing Constants
TEXT_CLEANUP_PATTERNS = {
    'html_tags': r'<[^>]+>',
    'escaped_quotes': r'\\(["\'])',
    'whitespace': r'\s+'
}

THRESHOLDS = {
    'max_clue_length': 400,
    'max_title_length': 60
}

# File Paths and Names
DEFAULT_PATHS = {
    'config_file': 'config/settings.json',
    'log_file': 'logs/jeopardy.log'
}

# Console Labels
LABELS = {
    'start': 'Start',
    'restart': 'Restart',
    'loading': 'Loading...',
    'load_failed': 'Failed to load game',
    'question_marker': '?',
    'answered_marker': '---'
}
