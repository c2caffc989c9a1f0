from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

from ..config import default_settings

class BaseTriviaClient(ABC):
    """Read-only access to a trivia source with random and by-id category lookups."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else default_settings()
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client (e.g., open an HTTP session)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources (e.g., close the HTTP session)."""
        pass

    @abstractmethod
    async def get_random_category(self, offset: int) -> Optional[Dict[str, Any]]:
        """Return the category summary found at ``offset``, or None if the offset is empty."""
        pass

    @abstractmethod
    async def get_category(self, category_id: int) -> Dict[str, Any]:
        """Return one category with its full clue list."""
        pass

    @property
    def max_offset(self) -> int:
        """Upper bound (exclusive) of valid random offsets."""
        return self.config['api']['max_offset']

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
