"""Story repository backed by the HN API."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from hnclone.domain.story import Story
from hnclone.exceptions import StoryListingError
from hnclone.infrastructure.hn_client import HNApiClient

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 30


def is_live_item(data: dict[str, Any] | None, item_type: str) -> bool:
    """Check a raw record exists, is not deleted/dead and has the given type."""
    return bool(
        data
        and not data.get("deleted")
        and not data.get("dead")
        and data.get("type") == item_type
    )


class StoryRepository:
    """Repository for fetching stories from HN.

    Single and id-list lookups degrade to None / [] on failure. Listings
    (top stories and categories) raise StoryListingError instead, so callers
    can tell an empty listing from a broken one.
    """

    def __init__(self, client: HNApiClient) -> None:
        """Initialize repository with an HN API client."""
        self.client = client
        self._category_sources: dict[str, Callable[[], Awaitable[list[int]]]] = {
            "new": client.get_new_story_ids,
            "best": client.get_best_story_ids,
            "ask": client.get_ask_story_ids,
            "show": client.get_show_story_ids,
            "jobs": client.get_job_story_ids,
        }

    @property
    def categories(self) -> list[str]:
        """Names accepted by get_stories_by_category."""
        return list(self._category_sources)

    async def _fetch_listing(self, story_ids: list[int], limit: int) -> list[Story]:
        """Slice ids to limit, fetch item bodies and keep live stories."""
        items = await self.client.get_items(story_ids[:limit])
        return [Story.from_hn_api(item) for item in items if is_live_item(item, "story")]

    async def get_top_stories(self, limit: int = DEFAULT_LIMIT) -> list[Story]:
        """Fetch the front page stories.

        Args:
            limit: Number of ids taken from the front of the top list

        Returns:
            Live stories in top-list order

        Raises:
            StoryListingError: If the listing could not be fetched
        """
        try:
            story_ids = await self.client.get_top_story_ids()
            stories = await self._fetch_listing(story_ids, limit)
        except Exception as e:
            logger.error(f"Error fetching top stories: {e}")
            raise StoryListingError("Failed to fetch top stories") from e

        logger.info(f"Fetched {len(stories)} top stories")
        return stories

    async def get_story_by_id(self, story_id: int) -> Story | None:
        """Fetch a single story, None if missing, deleted or not a story."""
        try:
            item = await self.client.get_item(story_id)
        except Exception as e:
            logger.error(f"Error fetching story {story_id}: {e}")
            return None

        if not is_live_item(item, "story"):
            return None
        return Story.from_hn_api(item)

    async def get_stories_by_ids(self, story_ids: list[int]) -> list[Story]:
        """Fetch stories by id, skipping anything that is not a live story."""
        try:
            items = await self.client.get_items(story_ids)
        except Exception as e:
            logger.error(f"Error fetching stories by IDs: {e}")
            return []

        return [Story.from_hn_api(item) for item in items if is_live_item(item, "story")]

    async def get_stories_by_category(
        self,
        category: str,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Story]:
        """Fetch stories from a named listing.

        Args:
            category: One of new, best, ask, show, jobs (case-insensitive)
            limit: Number of ids taken from the front of the list

        Returns:
            Live stories in listing order

        Raises:
            StoryListingError: On an unknown category or a failed fetch
        """
        try:
            source = self._category_sources.get(category.lower())
            if source is None:
                raise ValueError(f"Unknown category: {category}")
            story_ids = await source()
            stories = await self._fetch_listing(story_ids, limit)
        except Exception as e:
            logger.error(f"Error fetching {category} stories: {e}")
            raise StoryListingError(f"Failed to fetch {category} stories") from e

        logger.info(f"Fetched {len(stories)} {category} stories")
        return stories
