"""Clue loading: turn a raw API category into a Category of normalized clues."""

import logging
from typing import Any, Dict

from ..api.base import BaseTriviaClient
from ..exceptions import NotFoundError
from ..models import Category, Clue, RevealState
from ..utils.text_processor import clean_clue_text, clean_title

logger = logging.getLogger(__name__)


def normalize_clue(raw: Dict[str, Any]) -> Clue:
    """Keep only question and answer; every other source field is dropped."""
    return Clue(
        question=clean_clue_text(raw.get('question')),
        answer=clean_clue_text(raw.get('answer')),
        showing=RevealState.UNREVEALED
    )


def normalize_category(raw: Dict[str, Any]) -> Category:
    clues = [normalize_clue(item) for item in raw.get('clues') or [] if isinstance(item, dict)]
    return Category(title=clean_title(raw.get('title')), clues=clues, id=raw.get('id'))


async def load_category(client: BaseTriviaClient, category_id: int) -> Category:
    """
    Fetch a category and normalize its clues.

    Args:
        client: Trivia API client
        category_id: Id of the category to load

    Returns:
        Category with every clue unrevealed and without an id yet

    Raises:
        NotFoundError: If the category does not exist
        NetworkError: If the request fails
    """
    raw = await client.get_category(category_id)
    if raw.get('id') is not None and raw['id'] != category_id:
        raise NotFoundError(f"Requested category {category_id} but received {raw['id']}")

    category = normalize_category(raw)
    if category.id is None:
        category.id = category_id

    logger.debug(f"Loaded category {category_id} '{category.title}' with {len(category.clues)} clues")
    return category
