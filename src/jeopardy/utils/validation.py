from typing import List, Mapping, Tuple
import logging

from ..models import Category, Clue
from .text_processor import TextProcessor

class BoardValidator:
    """Validation of an assembled board before it is handed to the renderer."""

    def __init__(self, num_categories: int, clues_per_category: int):
        self.logger = logging.getLogger(__name__)
        self.num_categories = num_categories
        self.clues_per_category = clues_per_category

    def validate_board(self, categories: List[Category],
                       bank: Mapping[int, Clue]) -> Tuple[bool, List[str], List[str]]:
        """Validate board shape, clue content and id assignment."""
        errors: List[str] = []
        warnings: List[str] = []

        # Shape validation
        if len(categories) != self.num_categories:
            errors.append(f"Expected {self.num_categories} categories, got {len(categories)}")

        for category in categories:
            if len(category.clues) != self.clues_per_category:
                errors.append(f"Category '{category.title}' has {len(category.clues)} clues, "
                              f"expected {self.clues_per_category}")

        if errors:
            # Id checks below index by row, which is meaningless on a wrong shape
            return False, errors, warnings

        # Clue content validation
        for category in categories:
            for clue in category.clues:
                if not TextProcessor.is_valid_clue(clue.question, clue.answer):
                    errors.append(f"Clue {clue.id} in '{category.title}' has an empty question or answer")
                elif TextProcessor.is_overlong(clue.question) or TextProcessor.is_overlong(clue.answer):
                    warnings.append(f"Clue {clue.id} in '{category.title}' is very long")

        errors.extend(self._validate_ids(categories))
        errors.extend(self._validate_bank(categories, bank))
        warnings.extend(self._check_titles(categories))

        is_valid = len(errors) == 0
        if not is_valid:
            self.logger.warning(f"Board failed validation with {len(errors)} errors")
        for warning in warnings:
            self.logger.debug(f"Board warning: {warning}")
        return is_valid, errors, warnings

    def _validate_ids(self, categories: List[Category]) -> List[str]:
        """Ids must run 0..N-1 in row-major order."""
        errors = []
        expected = 0
        for row in range(self.clues_per_category):
            for col, category in enumerate(categories):
                clue = category.clues[row]
                if clue.id != expected:
                    errors.append(f"Clue at row {row}, column {col} has id {clue.id}, expected {expected}")
                expected += 1
        return errors

    def _validate_bank(self, categories: List[Category], bank: Mapping[int, Clue]) -> List[str]:
        errors = []
        total = self.num_categories * self.clues_per_category
        if len(bank) != total:
            errors.append(f"Clue bank has {len(bank)} entries, expected {total}")

        for category in categories:
            for clue in category.clues:
                if bank.get(clue.id) is not clue:
                    errors.append(f"Clue bank entry {clue.id} is not the clue shown on the board")
        return errors

    def _check_titles(self, categories: List[Category]) -> List[str]:
        warnings = []
        seen = set()
        for category in categories:
            key = category.title.lower()
            if key in seen:
                warnings.append(f"Duplicate category title: '{category.title}'")
            seen.add(key)
            if not category.title:
                warnings.append(f"Category {category.id} has an empty title")
        return warnings


def validate_board(categories: List[Category], bank: Mapping[int, Clue],
                   num_categories: int, clues_per_category: int) -> Tuple[bool, List[str], List[str]]:
    """Validate a board with a one-off BoardValidator."""
    validator = BoardValidator(num_categories, clues_per_category)
    return validator.validate_board(categories, bank)
