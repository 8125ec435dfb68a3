"""Request-keyed data hooks binding controllers and presenters to the views.

A hook takes a stable key (string or tuple) and an async producer, and
returns ``SWRResponse(data, error, is_loading, mutate)``. Results are kept in
an in-process RequestCache that deduplicates concurrent fetches of the same
key and serves stale data while revalidating in the background.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from hnclone.controllers import CommentController, StoryController
from hnclone.controllers.comment_controller import STORY_NOT_FOUND
from hnclone.exceptions import HookError
from hnclone.presenters import (
    CommentPresenter,
    CommentViewModel,
    StoryPresenter,
    StoryViewModel,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
Fetcher = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class RevalidationPolicy:
    """When cached data for a key is fetched again.

    ``refresh_interval`` (seconds) keeps data fresh for that long and makes
    the page poll for it. The focus/reconnect flags translate into the HTMX
    triggers of the polling element; on the server, reconnect also means a
    failed fetch is retried on the next access.
    """

    revalidate_on_focus: bool = False
    revalidate_on_reconnect: bool = True
    refresh_interval: float | None = None

    def hx_trigger(self) -> str:
        """HTMX ``hx-trigger`` value implementing this policy in the browser."""
        triggers = ["load"]
        if self.refresh_interval:
            triggers.append(f"every {int(self.refresh_interval)}s")
        if self.revalidate_on_focus:
            triggers.append("visibilitychange[document.visibilityState === 'visible'] from:document")
        if self.revalidate_on_reconnect:
            triggers.append("online from:window")
        return ", ".join(triggers)


@dataclass
class CacheEntry:
    data: Any = None
    error: Exception | None = None
    updated_at: float = 0.0


@dataclass
class SWRResponse(Generic[T]):
    data: T | None
    error: Exception | None
    is_loading: bool
    mutate: Callable[[], Awaitable[Any]]


@dataclass
class StoryDetailsResponse:
    story: StoryViewModel | None
    comments: list[CommentViewModel] = field(default_factory=list)
    is_loading: bool = False
    error: Exception | None = None
    mutate_story: Callable[[], Awaitable[Any]] | None = None
    mutate_comments: Callable[[], Awaitable[Any]] | None = None


async def _noop_mutate() -> None:
    return None


class RequestCache:
    """In-process keyed cache with stale-while-revalidate semantics."""

    def __init__(
        self,
        dedupe_interval: float = 2.0,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            dedupe_interval: Seconds during which a cached result is reused
                without revalidation
            max_entries: Oldest entries are evicted beyond this size
            clock: Monotonic time source
        """
        self.dedupe_interval = dedupe_interval
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._inflight: dict[Hashable, asyncio.Task] = {}
        self._background: set[asyncio.Task] = set()

    def get(self, key: Hashable) -> CacheEntry | None:
        return self._entries.get(key)

    def clear(self) -> None:
        self._entries.clear()

    def _store(self, key: Hashable, entry: CacheEntry) -> None:
        self._entries.pop(key, None)
        self._entries[key] = entry
        while len(self._entries) > self.max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]

    async def _run(self, key: Hashable, fetcher: Fetcher) -> CacheEntry:
        try:
            data = await fetcher()
        except Exception as e:
            logger.warning(f"Fetch for {key!r} failed: {e}")
            previous = self._entries.get(key)
            entry = CacheEntry(
                data=previous.data if previous else None,
                error=e,
                updated_at=self._clock(),
            )
        else:
            entry = CacheEntry(data=data, updated_at=self._clock())
        self._store(key, entry)
        return entry

    async def revalidate(self, key: Hashable, fetcher: Fetcher) -> CacheEntry:
        """Fetch ``key`` now, joining a fetch already in flight for it."""
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, fetcher))
            self._inflight[key] = task
            task.add_done_callback(lambda _: self._inflight.pop(key, None))
        return await asyncio.shield(task)

    def _revalidate_in_background(self, key: Hashable, fetcher: Fetcher) -> None:
        if key in self._inflight:
            return
        task = asyncio.ensure_future(self.revalidate(key, fetcher))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    def _is_fresh(self, entry: CacheEntry, policy: RevalidationPolicy) -> bool:
        age = self._clock() - entry.updated_at
        if age < self.dedupe_interval:
            return True
        return policy.refresh_interval is not None and age < policy.refresh_interval

    async def use(
        self,
        key: Hashable | None,
        fetcher: Fetcher,
        policy: RevalidationPolicy = RevalidationPolicy(),
    ) -> SWRResponse:
        """Resolve ``key`` through the cache.

        A None key disables the request: nothing is fetched and the response
        is empty. A missing entry is fetched and awaited; a failed entry is
        retried when the policy revalidates on reconnect; stale data is
        returned as-is while a background fetch refreshes it.
        """
        if key is None:
            return SWRResponse(data=None, error=None, is_loading=False, mutate=_noop_mutate)

        async def mutate() -> Any:
            return (await self.revalidate(key, fetcher)).data

        entry = self._entries.get(key)
        if entry is None or (entry.error is not None and policy.revalidate_on_reconnect):
            entry = await self.revalidate(key, fetcher)
        elif not self._is_fresh(entry, policy):
            self._revalidate_in_background(key, fetcher)

        return SWRResponse(
            data=entry.data,
            error=entry.error,
            is_loading=entry.data is None and entry.error is None and key in self._inflight,
            mutate=mutate,
        )


async def fetch_top_stories(
    limit: int, controller: StoryController
) -> list[StoryViewModel]:
    result = await controller.get_top_stories(limit)
    if not result.success or result.data is None:
        raise HookError(result.error or "Failed to fetch stories")
    return StoryPresenter.present_multiple(result.data)


async def fetch_category_stories(
    category: str, limit: int, controller: StoryController
) -> list[StoryViewModel]:
    result = await controller.get_stories_by_category(category, limit)
    if not result.success or result.data is None:
        raise HookError(result.error or "Failed to fetch stories")
    return StoryPresenter.present_multiple(result.data)


async def fetch_story_details(
    story_id: int, controller: StoryController
) -> StoryViewModel:
    result = await controller.get_story_details(story_id)
    if not result.success or not result.data:
        raise HookError(result.error or STORY_NOT_FOUND)
    return StoryPresenter.present(result.data)


async def fetch_comments_for_story(
    story_id: int, controller: CommentController
) -> list[CommentViewModel]:
    """Top-level comments with reply placeholders; [] on any failure."""
    result = await controller.get_comments_for_story(story_id)
    if not result.success or not result.data:
        return []
    return CommentPresenter.present_with_replies(result.data)


async def fetch_comment_thread(
    comment_id: int, level: int, controller: CommentController
) -> list[CommentViewModel]:
    """One comment at ``level`` followed by placeholders for its replies."""
    result = await controller.get_comments([comment_id])
    if not result.success:
        raise HookError(result.error or "Failed to fetch comment")
    return CommentPresenter.present_with_replies(result.data, level)


class DataHooks:
    """Hooks used by the web views, keyed by request parameters."""

    def __init__(
        self,
        story_controller: StoryController,
        comment_controller: CommentController,
        cache: RequestCache,
        refresh_seconds: float = 300,
    ) -> None:
        self.story_controller = story_controller
        self.comment_controller = comment_controller
        self.cache = cache
        self.listing_policy = RevalidationPolicy(refresh_interval=refresh_seconds)
        self.detail_policy = RevalidationPolicy()

    async def use_top_stories(self, limit: int = 30) -> SWRResponse[list[StoryViewModel]]:
        return await self.cache.use(
            ("top-stories", limit),
            lambda: fetch_top_stories(limit, self.story_controller),
            self.listing_policy,
        )

    async def refresh_top_stories(self, limit: int = 30) -> CacheEntry:
        """Fetch the top stories listing once and store it under its key."""
        return await self.cache.revalidate(
            ("top-stories", limit),
            lambda: fetch_top_stories(limit, self.story_controller),
        )

    async def use_category_stories(
        self, category: str, limit: int = 30
    ) -> SWRResponse[list[StoryViewModel]]:
        return await self.cache.use(
            ("category-stories", category, limit),
            lambda: fetch_category_stories(category, limit, self.story_controller),
            self.listing_policy,
        )

    async def use_story_details(self, story_id: int | None) -> StoryDetailsResponse:
        """Story and its comments, fetched concurrently under separate keys."""
        story_key = ("story-details", story_id) if story_id else None
        comments_key = ("story-comments", story_id) if story_id else None

        story, comments = await asyncio.gather(
            self.cache.use(
                story_key,
                lambda: fetch_story_details(story_id, self.story_controller),
                self.detail_policy,
            ),
            self.cache.use(
                comments_key,
                lambda: fetch_comments_for_story(story_id, self.comment_controller),
                self.detail_policy,
            ),
        )

        return StoryDetailsResponse(
            story=story.data,
            comments=comments.data or [],
            is_loading=story.is_loading or comments.is_loading,
            error=story.error or comments.error,
            mutate_story=story.mutate,
            mutate_comments=comments.mutate,
        )

    async def use_comment_thread(
        self, comment_id: int, level: int = 0
    ) -> SWRResponse[list[CommentViewModel]]:
        return await self.cache.use(
            ("comment-thread", comment_id, level),
            lambda: fetch_comment_thread(comment_id, level, self.comment_controller),
            self.detail_policy,
        )
