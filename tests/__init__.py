"""
Test suite for the Jeopardy board.

This package contains tests for all components of the game:
- Category fetching and clue loading
- Clue selection and the clue bank
- Reveal state and game sessions
- The trivia API client
- Text processing, validation, configuration and the console
"""
