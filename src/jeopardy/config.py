"""
Centralized configuration handling for the Jeopardy board.

Settings live in a JSON file (config/settings.json by default) with three
sections: ``api``, ``game`` and ``logging``. Any key missing from the file
falls back to DEFAULT_SETTINGS so a partial file is enough.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import (
    BASE_URL, CLUES_PER_CATEGORY, DEFAULT_PATHS, MAX_CATEGORY_OFFSET,
    NUM_CATEGORIES, RATE_LIMITS, RETRY_LIMITS, TIMEOUTS, VALUE_STEP
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "api": {
        "base_url": BASE_URL,
        "max_offset": MAX_CATEGORY_OFFSET,
        "timeout_seconds": TIMEOUTS['request'],
        "retry": {
            "attempts": RETRY_LIMITS['http_attempts'],
            "min_wait": RETRY_LIMITS['http_wait_min'],
            "max_wait": RETRY_LIMITS['http_wait_max']
        },
        "rate_limit": {
            "requests_per_minute": RATE_LIMITS['requests_per_minute']
        }
    },
    "game": {
        "num_categories": NUM_CATEGORIES,
        "clues_per_category": CLUES_PER_CATEGORY,
        "value_step": VALUE_STEP,
        "max_category_attempts": RETRY_LIMITS['max_category_attempts'],
        "max_clue_attempts": RETRY_LIMITS['max_clue_attempts'],
        "setup_timeout_seconds": TIMEOUTS['setup']
    },
    "logging": {
        "level": "INFO",
        "file": DEFAULT_PATHS['log_file'],
        "max_size": 1048576,
        "backup_count": 3
    }
}

_POSITIVE_INTS = [
    ('api', 'max_offset'),
    ('game', 'num_categories'),
    ('game', 'clues_per_category'),
    ('game', 'value_step'),
    ('game', 'max_category_attempts'),
    ('game', 'max_clue_attempts'),
]


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``override`` merged in, section by section."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_settings() -> Dict[str, Any]:
    """Get a fresh, mutable copy of the built-in settings."""
    return copy.deepcopy(DEFAULT_SETTINGS)


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file and fill in defaults.

    Args:
        config_path: Path to the settings file. When None, only the
            built-in defaults are returned.

    Returns:
        Complete settings dictionary

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If a numeric setting is out of range
    """
    if config_path is None:
        logger.debug("No configuration file given, using defaults")
        return default_settings()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        loaded = json.load(f)

    settings = _deep_merge(DEFAULT_SETTINGS, loaded)
    errors = validate_settings(settings)
    if errors:
        raise ValueError(f"Invalid configuration in {config_path}: {'; '.join(errors)}")

    logger.info(f"Loaded configuration from {config_path}")
    return settings


def validate_settings(settings: Dict[str, Any]) -> List[str]:
    """
    Check settings for values the game cannot work with.

    Returns:
        List of error messages, empty when the settings are usable
    """
    errors = []
    for section, key in _POSITIVE_INTS:
        value = settings.get(section, {}).get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            errors.append(f"{section}.{key} must be a positive integer (got {value!r})")

    for section, key in (('api', 'timeout_seconds'), ('game', 'setup_timeout_seconds')):
        value = settings[section].get(key)
        if not isinstance(value, (int, float)) or value <= 0:
            errors.append(f"{section}.{key} must be a positive number (got {value!r})")

    if not str(settings['api'].get('base_url', '')).startswith(('http://', 'https://')):
        errors.append(f"api.base_url must be an http(s) URL (got {settings['api'].get('base_url')!r})")

    return errors
