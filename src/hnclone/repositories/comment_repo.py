"""Comment repository backed by the HN API."""

import logging

from hnclone.domain.comment import Comment
from hnclone.infrastructure.hn_client import HNApiClient
from hnclone.repositories.story_repo import is_live_item

logger = logging.getLogger(__name__)


class CommentRepository:
    """Repository for fetching comments from HN. Failures degrade to empty."""

    def __init__(self, client: HNApiClient) -> None:
        """Initialize repository with an HN API client."""
        self.client = client

    async def get_comments_by_ids(self, comment_ids: list[int]) -> list[Comment]:
        """Fetch comments by id.

        Null, deleted, dead and non-comment records are dropped, so the
        result never holds more entries than ids requested.
        """
        if not comment_ids:
            return []

        try:
            items = await self.client.get_items(comment_ids)
        except Exception as e:
            logger.error(f"Error fetching comments by IDs: {e}")
            return []

        return [
            Comment.from_hn_api(item) for item in items if is_live_item(item, "comment")
        ]

    async def get_comment_by_id(self, comment_id: int) -> Comment | None:
        try:
            item = await self.client.get_item(comment_id)
        except Exception as e:
            logger.error(f"Error fetching comment {comment_id}: {e}")
            return None

        if not is_live_item(item, "comment"):
            return None
        return Comment.from_hn_api(item)

    async def _get_children(self, parent_id: int) -> list[Comment]:
        """Resolve a parent item and fetch the comments it lists as kids."""
        parent = await self.client.get_item(parent_id)
        if not parent or not parent.get("kids"):
            return []
        return await self.get_comments_by_ids(parent["kids"])

    async def get_comments_by_story_id(self, story_id: int) -> list[Comment]:
        """Fetch the top-level comments of a story."""
        try:
            return await self._get_children(story_id)
        except Exception as e:
            logger.error(f"Error fetching comments for story {story_id}: {e}")
            return []

    async def get_comment_replies(self, comment_id: int) -> list[Comment]:
        """Fetch the direct replies to a comment."""
        try:
            return await self._get_children(comment_id)
        except Exception as e:
            logger.error(f"Error fetching replies for comment {comment_id}: {e}")
            return []
