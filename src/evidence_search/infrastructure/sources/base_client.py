"""
Base API Client - Common HTTP request pattern with retry, rate limiting, and circuit breaker.

Shared by every bibliographic provider:
- Automatic retry on 429 (rate limit) with Retry-After support
- Rate limiting (configurable interval between requests)
- Circuit breaker for fault tolerance
- Consistent error handling and logging

Every failure path returns None. Providers turn that into an empty result
list so one failing backend never fails a literature search.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx
from typing_extensions import Self

from evidence_search.shared.async_utils import CircuitBreaker
from evidence_search.shared.exceptions import RateLimitError

logger = logging.getLogger(__name__)

USER_AGENT = "evidence-search/1.0"


class BaseAPIClient:
    """
    Base class for external API clients.

    Provides common infrastructure:
    - httpx.AsyncClient management
    - Rate limiting with configurable interval
    - Retry on 429 with exponential backoff
    - Circuit breaker for fault tolerance

    Subclasses should set `_service_name` and can override
    `_parse_response()` for custom extraction logic.

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyAPI"

            def __init__(self):
                super().__init__(base_url="https://api.example.com", min_interval=0.1)

            async def get_item(self, item_id: str) -> dict | None:
                return await self._make_request(f"/items/{item_id}")
    """

    _service_name: str = "API"
    _MAX_RETRIES: int = 3

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        min_interval: float = 0.1,
        headers: dict[str, str] | None = None,
        circuit_breaker: CircuitBreaker | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            base_url: Base URL for the API (optional, can pass full URLs)
            timeout: Request timeout in seconds
            min_interval: Minimum seconds between requests (rate limiting)
            headers: Default headers for all requests
            circuit_breaker: Optional circuit breaker for fault tolerance.
                             If None, a default one is created (threshold=10, recovery=60s).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._min_interval = min_interval
        self._last_request_time = 0.0
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": USER_AGENT, **(headers or {})},
            limits=httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            ),
        )
        self._circuit_breaker = circuit_breaker or CircuitBreaker(failure_threshold=10, recovery_timeout=60.0)

    @property
    def name(self) -> str:
        return self._service_name

    async def _rate_limit(self) -> None:
        """Enforce minimum interval between requests."""
        elapsed = time.time() - self._last_request_time
        if elapsed < self._min_interval:
            await asyncio.sleep(self._min_interval - elapsed)
        self._last_request_time = time.time()

    def _build_url(self, url: str) -> str:
        """Build full URL from path or full URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}{url}"

    async def _make_request(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        expect_json: bool = True,
    ) -> dict[str, Any] | str | None:
        """
        Make HTTP GET request with retry on 429 and circuit breaker protection.

        Args:
            url: Full URL or path (appended to base_url)
            params: Query parameters
            headers: Additional headers for this request
            expect_json: If True, parse response as JSON; otherwise return text

        Returns:
            Parsed JSON, response text, or None on error
        """
        full_url = self._build_url(url)

        for attempt in range(self._MAX_RETRIES + 1):
            await self._rate_limit()
            try:
                async with self._circuit_breaker:
                    response = await self._client.get(full_url, params=params, headers=headers or {})

                    if response.status_code == 429:
                        if attempt < self._MAX_RETRIES:
                            retry_after = self._get_retry_after(response, attempt)
                            logger.warning(
                                f"{self._service_name}: Rate limited (429), "
                                f"retry {attempt + 1}/{self._MAX_RETRIES} in {retry_after:.1f}s"
                            )
                            await asyncio.sleep(retry_after)
                            continue
                        logger.warning(f"{self._service_name}: Rate limit exceeded after retries")
                        return None

                    response.raise_for_status()
                    return self._parse_response(response, expect_json)

            except RateLimitError as e:
                logger.warning(
                    f"{self._service_name}: Circuit breaker open, skipping request "
                    f"(retry in {e.retry_after:.0f}s)"
                )
                return None
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"{self._service_name} HTTP error {e.response.status_code}: {e.response.reason_phrase}"
                )
                return None
            except httpx.RequestError as e:
                if attempt < self._MAX_RETRIES:
                    logger.warning(f"{self._service_name} request error (attempt {attempt + 1}): {e}")
                    await asyncio.sleep(2 ** (attempt + 1))
                    continue
                logger.error(f"{self._service_name} request failed: {e}")
                return None
            except ValueError as e:
                # Invalid JSON body
                logger.error(f"{self._service_name} returned an unparseable response: {e}")
                return None

        return None

    def _parse_response(self, response: httpx.Response, expect_json: bool) -> dict[str, Any] | str:
        """Parse response body. Override for custom extraction logic."""
        if expect_json:
            return response.json()
        return response.text

    @staticmethod
    def _get_retry_after(response: httpx.Response, attempt: int) -> float:
        """Extract Retry-After from response headers, with exponential backoff fallback."""
        try:
            return float(response.headers.get("Retry-After", 2 ** (attempt + 1)))
        except (ValueError, TypeError):
            return float(2 ** (attempt + 1))

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
