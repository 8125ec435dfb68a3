"""Hacker News Firebase API client."""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable
from typing import Any

import aiohttp
from aiohttp import ClientTimeout

from hnclone.config import get_settings
from hnclone.exceptions import HNApiError

logger = logging.getLogger(__name__)
settings = get_settings()


class HNApiClient:
    """Async client for the Hacker News Firebase API.

    Every call is a single GET returning the decoded JSON payload unmodified.
    There are no retries and no caching at this layer.
    """

    def __init__(
        self,
        base_url: str | None = None,
        max_concurrent: int | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize HN client.

        Args:
            base_url: HN API base URL (defaults to config)
            max_concurrent: Cap on in-flight batch requests, 0 for no cap
                (defaults to config)
            timeout_seconds: Total request timeout, None for no timeout
                (defaults to config)
        """
        self.base_url = (base_url or settings.hn_api_base_url).rstrip("/")
        if max_concurrent is None:
            max_concurrent = settings.hn_max_concurrent_requests
        self.semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent > 0 else None
        if timeout_seconds is None:
            timeout_seconds = settings.hn_request_timeout_seconds
        self.timeout = ClientTimeout(total=timeout_seconds)
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _fetch_json(self, endpoint: str) -> Any:
        """GET ``<base_url><endpoint>.json`` and decode the body.

        Args:
            endpoint: Resource path, e.g. ``/item/8863``

        Returns:
            Decoded JSON (``None`` when the API answers ``null``)

        Raises:
            HNApiError: On a non-success HTTP status
            aiohttp.ClientError: On transport failures (propagated unchanged)
        """
        url = f"{self.base_url}{endpoint}.json"
        session = await self._get_session()
        logger.debug(f"GET {url}")
        async with session.get(url) as response:
            if not response.ok:
                raise HNApiError(response.status, response.reason or "")
            return await response.json(content_type=None)

    async def _gather_isolated(self, calls: list[Awaitable[Any]]) -> list[Any]:
        """Run calls concurrently; a failed call yields None in its slot."""

        async def run(call: Awaitable[Any]) -> Any:
            async with self.semaphore or contextlib.nullcontext():
                return await call

        results = await asyncio.gather(
            *(run(call) for call in calls), return_exceptions=True
        )

        payloads = []
        for result in results:
            if isinstance(result, BaseException):
                logger.warning(f"Batch request failed: {result!r}")
                payloads.append(None)
            else:
                payloads.append(result)
        return payloads

    async def get_top_story_ids(self) -> list[int]:
        """Get top story IDs, most relevant first."""
        return await self._fetch_json("/topstories")

    async def get_new_story_ids(self) -> list[int]:
        """Get newest story IDs."""
        return await self._fetch_json("/newstories")

    async def get_best_story_ids(self) -> list[int]:
        """Get best story IDs."""
        return await self._fetch_json("/beststories")

    async def get_ask_story_ids(self) -> list[int]:
        """Get Ask HN story IDs."""
        return await self._fetch_json("/askstories")

    async def get_show_story_ids(self) -> list[int]:
        """Get Show HN story IDs."""
        return await self._fetch_json("/showstories")

    async def get_job_story_ids(self) -> list[int]:
        """Get job posting IDs."""
        return await self._fetch_json("/jobstories")

    async def get_item(self, item_id: int) -> dict[str, Any] | None:
        """Get any item by ID (story, comment, job, poll, etc.).

        Returns the raw record so the caller can check its type.

        Args:
            item_id: HN item ID

        Returns:
            Raw item dict or None if the API has no such item
        """
        return await self._fetch_json(f"/item/{item_id}")

    async def get_items(self, item_ids: list[int]) -> list[dict[str, Any] | None]:
        """Fetch multiple items concurrently, preserving input order.

        Args:
            item_ids: List of HN item IDs

        Returns:
            One raw record (or None) per requested id
        """
        if not item_ids:
            return []
        items = await self._gather_isolated([self.get_item(iid) for iid in item_ids])
        logger.debug(f"Fetched {sum(i is not None for i in items)}/{len(item_ids)} items")
        return items

    async def get_user(self, user_id: str) -> dict[str, Any] | None:
        """Get a user profile by handle."""
        return await self._fetch_json(f"/user/{user_id}")

    async def get_users(self, user_ids: list[str]) -> list[dict[str, Any] | None]:
        """Fetch multiple user profiles concurrently, preserving input order."""
        if not user_ids:
            return []
        return await self._gather_isolated([self.get_user(uid) for uid in user_ids])
