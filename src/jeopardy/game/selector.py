import logging
import random
from typing import Iterable, List, Optional

from ..exceptions import GameAssemblyError, ValidationError
from ..models import Category, Clue

class ClueSelector:
    """
    Reduces each category to a fixed number of randomly chosen, well-formed clues.

    Indices are drawn uniformly at random and without replacement. Clues with
    an empty question or answer are skipped. The number of draws is bounded
    so an unlucky or malformed category cannot hang the game.
    """

    def __init__(self, clues_per_category: int, max_attempts: int,
                 rng: Optional[random.Random] = None):
        self.logger = logging.getLogger(__name__)
        self.clues_per_category = clues_per_category
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

    def select(self, category: Category) -> Category:
        """
        Replace ``category.clues`` with a sample of ``clues_per_category`` clues.

        Categories that already have exactly that many clues keep them as
        they are, provided all of them are well formed.

        Returns:
            The same category, mutated in place

        Raises:
            ValidationError: If the category cannot supply enough valid clues
            GameAssemblyError: If the draw limit is reached first
        """
        clues = category.clues
        wanted = self.clues_per_category
        valid_count = sum(1 for clue in clues if clue.is_well_formed)

        if len(clues) < wanted:
            raise ValidationError(f"Category '{category.title}' has only {len(clues)} clues, needs {wanted}")
        if valid_count < wanted:
            raise ValidationError(
                f"Category '{category.title}' has only {valid_count} well-formed clues, needs {wanted}"
            )
        if len(clues) == wanted:
            return category

        picked = self._pick_indices(clues)
        category.clues = [clues[index] for index in picked]
        self.logger.debug(f"Selected clue indices {picked} from {len(clues)} in '{category.title}'")
        return category

    def select_all(self, categories: Iterable[Category]) -> List[Category]:
        return [self.select(category) for category in categories]

    def _pick_indices(self, clues: List[Clue]) -> List[int]:
        picked = {}
        attempts = 0

        while len(picked) < self.clues_per_category:
            if attempts >= self.max_attempts:
                raise GameAssemblyError(
                    f"Could not assemble game: picked {len(picked)} of {self.clues_per_category} "
                    f"clues in {attempts} draws"
                )
            attempts += 1

            index = self.rng.randrange(len(clues))
            if index in picked or not clues[index].is_well_formed:
                continue
            picked[index] = None

        return list(picked)
