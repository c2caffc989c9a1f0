"""
Async client for jService-compatible trivia APIs.

Two read-only endpoints are used:

- ``api/categories?count=1&offset=N`` returns a one-element list with the
  category summary stored at offset N
- ``api/category?id=N`` returns the category with all of its clues

Transient failures (connection errors, timeouts, 5xx) are retried with
exponential backoff; unknown categories are reported at once.
"""

import asyncio
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import aiohttp # type: ignore
from tenacity import ( # type: ignore
    AsyncRetrying, retry_if_exception_type, retry_if_not_exception_type,
    stop_after_attempt, wait_exponential
)

from .base import BaseTriviaClient
from ..constants import ENDPOINTS
from ..exceptions import NetworkError, NotFoundError, ValidationError
from ..utils.rate_limiter import RateLimiter


class JServiceClient(BaseTriviaClient):
    """
    aiohttp client for the jService trivia API.

    One ClientSession is opened by ``initialize()`` and reused for every
    request until ``close()``. Every request passes through the rate limiter
    and is bounded by the configured per-request timeout.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the client.

        Args:
            config: Settings dictionary (see jeopardy.config); the ``api``
                section supplies base URL, timeout, retry and rate limits
        """
        super().__init__(config)
        api_config = self.config['api']

        base_url = api_config['base_url']
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = aiohttp.ClientTimeout(total=api_config['timeout_seconds'])
        self.retry_config = api_config['retry']
        self.rate_limiter = RateLimiter(api_config['rate_limit']['requests_per_minute'])
        self.session: Optional[aiohttp.ClientSession] = None

    async def initialize(self) -> None:
        """Open the shared HTTP session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={'Accept': 'application/json'}
            )
            self.logger.info(f"Trivia API client initialized for {self.base_url}")

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session is not None and not self.session.closed:
            try:
                await self.session.close()
                self.logger.info("Trivia API session closed")
                self.logger.debug(f"Requests made this session: {self.rate_limiter.total_requests}")
            except Exception as e:
                self.logger.error(f"Error closing trivia API session: {e}")
        self.session = None

    async def get_random_category(self, offset: int) -> Optional[Dict[str, Any]]:
        """
        Fetch the category summary stored at ``offset``.

        Args:
            offset: Position in the API's category list

        Returns:
            Dictionary with at least ``id`` and ``title``, or None when the
            offset lies past the end of the list

        Raises:
            ValidationError: If the entry at the offset is not a category
            NetworkError: If the request fails
        """
        payload = await self._get_json(ENDPOINTS['random_category'], {'count': 1, 'offset': offset})

        if not isinstance(payload, list):
            raise NetworkError(f"Unexpected category list payload at offset {offset}: {type(payload).__name__}")
        if not payload:
            self.logger.debug(f"No category at offset {offset}")
            return None

        summary = payload[0]
        if not isinstance(summary, dict) or summary.get('id') is None:
            raise ValidationError(f"Malformed category summary at offset {offset}: {summary!r}")

        return summary

    async def get_category(self, category_id: int) -> Dict[str, Any]:
        """
        Fetch one category with its clues.

        Args:
            category_id: Category identifier from the API

        Returns:
            Raw category dictionary including the ``clues`` list

        Raises:
            NotFoundError: If the API does not know the category
            NetworkError: If the request fails
        """
        payload = await self._get_json(ENDPOINTS['category'], {'id': category_id})

        if not isinstance(payload, dict) or not payload or 'error' in payload:
            raise NotFoundError(f"Category {category_id} not found")

        return payload

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """GET an endpoint with retries on transient failures."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry_config['attempts']),
            wait=wait_exponential(
                multiplier=1,
                min=self.retry_config['min_wait'],
                max=self.retry_config['max_wait']
            ),
            retry=retry_if_exception_type(NetworkError) & retry_if_not_exception_type(NotFoundError),
            reraise=True
        )

        async for attempt in retrying:
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                if attempt_number > 1:
                    self.logger.warning(f"Retrying {endpoint} (attempt {attempt_number})")
                return await self._request(endpoint, params)

    async def _request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        if self.session is None or self.session.closed:
            await self.initialize()

        url = urljoin(self.base_url, endpoint)
        await self.rate_limiter.acquire()
        self.logger.debug(f"GET {url} params={params}")

        try:
            async with self.session.get(url, params=params) as response:
                if response.status == 404:
                    raise NotFoundError(f"HTTP 404 for {url}", status=404, url=url)
                if response.status < 200 or response.status >= 300:
                    raise NetworkError(f"HTTP {response.status} for {url}", status=response.status, url=url)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise NetworkError(f"Invalid JSON from {url}: {e}", status=response.status, url=url) from e
        except asyncio.TimeoutError as e:
            self.logger.error(f"Request to {url} timed out after {self.timeout.total}s")
            raise NetworkError(f"Request to {url} timed out", url=url) from e
        except aiohttp.ClientError as e:
            self.logger.error(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}", url=url) from e
