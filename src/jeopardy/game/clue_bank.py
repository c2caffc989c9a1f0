"""
Clue bank: stable ids for displayed clues and lookup back to the records.

Ids are dense and assigned in row-major order, so with 6 categories clue 0
is the top-left cell, clue 5 the top-right and clue 6 the first cell of the
second row. The bank stores the clue objects themselves; revealing a clue
through the bank changes what the board shows.
"""

import logging
from typing import Dict, Iterator, List, Mapping

from ..exceptions import ConsistencyError, ValidationError
from ..models import Category, Clue

logger = logging.getLogger(__name__)


class ClueBank(Mapping[int, Clue]):
    """Read-only id -> Clue mapping built once per game."""

    def __init__(self, clues: Dict[int, Clue]):
        self._clues = clues

    def __getitem__(self, clue_id: int) -> Clue:
        return self._clues[clue_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._clues)

    def __len__(self) -> int:
        return len(self._clues)

    def lookup(self, clue_id: int) -> Clue:
        """
        Resolve a cell id to its clue.

        Raises:
            ConsistencyError: If the id was never assigned; the board and
                the bank are out of sync
        """
        try:
            return self._clues[clue_id]
        except KeyError:
            raise ConsistencyError(f"Clue id {clue_id} is not on the board") from None

    def __repr__(self) -> str:
        return f"ClueBank({len(self._clues)} clues)"


def build_clue_bank(categories: List[Category], clues_per_category: int,
                    value_step: int = 100) -> ClueBank:
    """
    Assign ids and dollar values to every clue and index them.

    Args:
        categories: Final categories, each holding exactly clues_per_category clues
        clues_per_category: Number of rows on the board
        value_step: Dollar value of the first row; row N is worth (N + 1) * value_step

    Returns:
        ClueBank over the same clue objects

    Raises:
        ValidationError: If any category has the wrong number of clues
    """
    for category in categories:
        if len(category.clues) != clues_per_category:
            raise ValidationError(
                f"Category '{category.title}' has {len(category.clues)} clues, expected {clues_per_category}"
            )

    clues: Dict[int, Clue] = {}
    next_id = 0
    for row in range(clues_per_category):
        for category in categories:
            clue = category.clues[row]
            clue.id = next_id
            clue.value = (row + 1) * value_step
            clues[next_id] = clue
            next_id += 1

    logger.debug(f"Built clue bank with {next_id} clues over {len(categories)} categories")
    return ClueBank(clues)
