import logging
import random
from typing import List, Optional

from ..api.base import BaseTriviaClient
from ..exceptions import SourceExhaustedError

class CategoryFetcher:
    """Picks distinct random category ids from the trivia source."""

    def __init__(self, client: BaseTriviaClient, max_attempts: int,
                 rng: Optional[random.Random] = None):
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

    async def fetch_ids(self, count: int) -> List[int]:
        """
        Request one category at a random offset at a time until ``count``
        distinct ids are collected.

        Returns:
            Ids in the order they were first seen

        Raises:
            SourceExhaustedError: If max_attempts requests do not yield enough ids
        """
        # dict keeps insertion order, which becomes the column order
        chosen = {}
        attempts = 0

        while len(chosen) < count:
            if attempts >= self.max_attempts:
                self.logger.error(f"Gave up after {attempts} category requests "
                                  f"with {len(chosen)}/{count} distinct ids")
                raise SourceExhaustedError(
                    f"Could not assemble game: only {len(chosen)} of {count} categories "
                    f"found in {attempts} attempts"
                )
            attempts += 1

            offset = self.rng.randrange(self.client.max_offset)
            summary = await self.client.get_random_category(offset)
            if not summary or summary.get('id') is None:
                self.logger.debug(f"Offset {offset} returned no category")
                continue

            category_id = summary['id']
            if category_id in chosen:
                self.logger.debug(f"Duplicate category {category_id} at offset {offset}")
                continue

            chosen[category_id] = None
            self.logger.debug(f"Picked category {category_id} ({summary.get('title', '?')}) at offset {offset}")

        self.logger.info(f"Selected {count} categories in {attempts} requests: {list(chosen)}")
        return list(chosen)
