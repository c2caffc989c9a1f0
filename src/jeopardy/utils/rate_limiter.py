import asyncio
import time
from typing import Optional
import logging

class RateLimiter:
    """Spaces out trivia API requests to at most ``requests_per_minute``."""

    def __init__(self, requests_per_minute: int):
        if requests_per_minute <= 0:
            raise ValueError(f"requests_per_minute must be positive, got {requests_per_minute}")
        self.logger = logging.getLogger(__name__)
        self.requests_per_minute = requests_per_minute
        self.min_interval = 60.0 / requests_per_minute
        self.last_request_time: Optional[float] = None
        self.total_requests = 0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait until the next API request is allowed."""
        async with self._lock:
            if self.last_request_time is not None:
                elapsed = time.monotonic() - self.last_request_time
                if elapsed < self.min_interval:
                    sleep_time = self.min_interval - elapsed
                    self.logger.debug(f"Rate limiting API request: sleeping for {sleep_time:.2f} seconds")
                    await asyncio.sleep(sleep_time)

            self.last_request_time = time.monotonic()
            self.total_requests += 1

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False
