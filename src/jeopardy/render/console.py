"""
Console renderer for playing the board in a terminal.

The grid shows one column per category with upper-cased titles on top.
Each cell shows the clue id the player types to reveal it, followed by its
dollar value while unrevealed, a question marker once the question has been
read, and a dash once the answer is out. Question and answer text is printed
below the grid as it is revealed.
"""

import sys
from typing import Dict, List, Optional, TextIO

from .base import BoardRenderer
from ..constants import LABELS, THRESHOLDS
from ..models import Category, Clue, RevealState
from ..utils.text_processor import TextProcessor


class ConsoleRenderer(BoardRenderer):
    """Text renderer writing to a stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, column_width: int = 16):
        self.stream = stream or sys.stdout
        self.column_width = column_width
        self.start_label = LABELS['start']
        self._categories: List[Category] = []
        self._titles_by_clue: Dict[int, str] = {}

    def _write(self, text: str = "") -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def message(self, text: str) -> None:
        """Print a line of game chatter (help, prompts, notices)."""
        self._write(text)

    def redraw(self) -> None:
        self._write(self.format_board())

    def show_loading(self) -> None:
        self._categories = []
        self._titles_by_clue = {}
        self._write(LABELS['loading'])

    def hide_loading(self) -> None:
        self.start_label = LABELS['restart']

    def render_board(self, categories: List[Category]) -> None:
        self._categories = categories
        self._titles_by_clue = {
            clue.id: category.title for category in categories for clue in category.clues
        }
        self._write(self.format_board())

    def format_board(self) -> str:
        """Render the current grid as text."""
        if not self._categories:
            return ""

        width = self.column_width
        separator = "+" + "+".join("-" * (width + 2) for _ in self._categories) + "+"
        lines = [separator]

        titles = [
            TextProcessor.truncate_text(category.title.upper(), min(width, THRESHOLDS['max_title_length']))
            for category in self._categories
        ]
        lines.append("| " + " | ".join(title.center(width) for title in titles) + " |")
        lines.append(separator)

        rows = len(self._categories[0].clues)
        for row in range(rows):
            cells = [self._format_cell(category.clues[row]) for category in self._categories]
            lines.append("| " + " | ".join(cell.center(width) for cell in cells) + " |")
        lines.append(separator)

        return "\n".join(lines)

    def _format_cell(self, clue: Clue) -> str:
        if clue.showing is RevealState.UNREVEALED:
            return f"[{clue.id}] ${clue.value}"
        if clue.showing is RevealState.QUESTION_SHOWN:
            return f"[{clue.id}] {LABELS['question_marker']}"
        return f"[{clue.id}] {LABELS['answered_marker']}"

    def show_question(self, clue: Clue) -> None:
        title = self._titles_by_clue.get(clue.id, "")
        self._write(f"{title.upper()} for ${clue.value}: {clue.question}")

    def show_answer(self, clue: Clue) -> None:
        self._write(f"Answer: {clue.answer}")

    def show_error(self, message: str) -> None:
        self._write(f"{LABELS['load_failed']}: {message}")

    def clear(self) -> None:
        self._categories = []
        self._titles_by_clue = {}
        self._write(f"Type '{self.start_label.lower()}' to play.")
