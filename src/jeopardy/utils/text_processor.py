"""
Text Processing Utilities

This module provides centralized text processing functions for cleaning
and normalizing clue and category text returned by the trivia API.
"""

import html
import re
from typing import Any, Optional

from ..constants import TEXT_CLEANUP_PATTERNS, THRESHOLDS


class TextProcessor:
    """
    Handles text processing operations for trivia API content.

    Provides methods for cleaning clue questions and answers, normalizing
    category titles, and checking whether a clue is usable on the board.
    """

    @staticmethod
    def clean_clue_text(text: Optional[Any]) -> str:
        """
        Clean clue text by removing markup and normalizing whitespace.

        Answers from the API frequently carry ``<i>`` tags, HTML entities and
        backslash-escaped quotes.

        Args:
            text: Raw question or answer text (None and numbers are accepted)

        Returns:
            str: Cleaned text, empty string for missing values
        """
        if text is None:
            return ""

        cleaned = str(text)
        cleaned = re.sub(TEXT_CLEANUP_PATTERNS['html_tags'], '', cleaned)
        cleaned = html.unescape(cleaned)
        cleaned = re.sub(TEXT_CLEANUP_PATTERNS['escaped_quotes'], r'\1', cleaned)
        cleaned = re.sub(TEXT_CLEANUP_PATTERNS['whitespace'], ' ', cleaned)

        return cleaned.strip()

    @staticmethod
    def clean_title(text: Optional[Any]) -> str:
        """
        Clean a category title and cap its length.

        Titles get the same markup cleanup as clue text and are cut to
        ``max_title_length`` characters.

        Args:
            text: Raw category title

        Returns:
            str: Cleaned title
        """
        cleaned = TextProcessor.clean_clue_text(text)
        return TextProcessor.truncate_text(cleaned, THRESHOLDS['max_title_length'])

    @staticmethod
    def is_valid_clue(question: str, answer: str) -> bool:
        """
        Check that both sides of a clue have content.

        Args:
            question: Cleaned question text
            answer: Cleaned answer text

        Returns:
            bool: True if neither question nor answer is blank
        """
        return bool(question and question.strip()) and bool(answer and answer.strip())

    @staticmethod
    def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
        """
        Truncate text to specified length with suffix.

        Args:
            text: Text to truncate
            max_length: Maximum length including suffix
            suffix: Suffix to add when truncating

        Returns:
            str: Truncated text
        """
        if not text or len(text) <= max_length:
            return text

        truncated_length = max_length - len(suffix)
        return text[:truncated_length] + suffix

    @staticmethod
    def is_overlong(text: str) -> bool:
        """Whether clue text exceeds the length the console grid handles well."""
        return len(text) > THRESHOLDS['max_clue_length']


# Convenience functions
def clean_clue_text(text: Optional[Any]) -> str:
    """Clean clue text."""
    return TextProcessor.clean_clue_text(text)


def clean_title(text: Optional[Any]) -> str:
    """Clean category title."""
    return TextProcessor.clean_title(text)
