"""Data model for categories, clues and their reveal state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RevealState(Enum):
    """Three-stage visibility of a clue. Only ever advances forward."""

    UNREVEALED = "unrevealed"
    QUESTION_SHOWN = "question"
    ANSWER_SHOWN = "answer"


@dataclass(eq=False)
class Clue:
    """A single question/answer pair on the board.

    Clues compare by identity. The clue bank and the rendered board hold the
    same objects, and two clues with equal text are still different cells.
    """

    question: str
    answer: str
    showing: RevealState = RevealState.UNREVEALED
    id: Optional[int] = None
    value: Optional[int] = None

    @property
    def is_well_formed(self) -> bool:
        return bool(self.question) and bool(self.answer)


@dataclass
class Category:
    """A titled group of clues as returned by the trivia API."""

    title: str
    clues: List[Clue] = field(default_factory=list)
    id: Optional[int] = None
