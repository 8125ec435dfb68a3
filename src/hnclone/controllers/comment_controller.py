"""Comment controller."""

import logging
from typing import Protocol

from hnclone.controllers.result import ControllerResult
from hnclone.domain.comment import Comment
from hnclone.domain.story import Story
from hnclone.repositories.comment_repo import CommentRepository
from hnclone.usecases import FetchComments, FetchCommentsInput

logger = logging.getLogger(__name__)

STORY_NOT_FOUND = "Story not found"


class StoryLookup(Protocol):
    """Anything that resolves a story id into a controller result."""

    async def get_story_details(self, story_id: int) -> ControllerResult[Story | None]: ...


class CommentController:
    """Runs comment use cases and converts errors into failed results.

    Story resolution for get_comments_for_story goes through the injected
    StoryLookup (normally a StoryController).
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        story_lookup: StoryLookup,
    ) -> None:
        self.comment_repository = comment_repository
        self.fetch_comments_use_case = FetchComments(comment_repository)
        self.story_lookup = story_lookup

    async def get_comments(self, comment_ids: list[int]) -> ControllerResult[list[Comment]]:
        try:
            result = await self.fetch_comments_use_case.execute(
                FetchCommentsInput(comment_ids=comment_ids)
            )
            return ControllerResult(success=True, data=result.comments)
        except Exception as e:
            logger.error(f"Error in CommentController.get_comments: {e}")
            return ControllerResult(
                success=False, data=[], error="Failed to fetch story comments"
            )

    async def get_comments_for_story(self, story_id: int) -> ControllerResult[list[Comment]]:
        """Resolve the story, then fetch its top-level comments."""
        try:
            story_result = await self.story_lookup.get_story_details(story_id)
            if not story_result.success or not story_result.data:
                return ControllerResult(success=False, data=[], error=STORY_NOT_FOUND)

            return await self.get_comments(story_result.data.kid_ids)
        except Exception as e:
            logger.error(f"Error in CommentController.get_comments_for_story: {e}")
            return ControllerResult(
                success=False, data=[], error="Failed to fetch comments"
            )

    async def get_comment_replies(self, comment_id: int) -> ControllerResult[list[Comment]]:
        """Fetch the direct replies to a comment."""
        try:
            replies = await self.comment_repository.get_comment_replies(comment_id)
            return ControllerResult(success=True, data=replies)
        except Exception as e:
            logger.error(f"Error in CommentController.get_comment_replies: {e}")
            return ControllerResult(
                success=False, data=[], error="Failed to fetch comment replies"
            )
