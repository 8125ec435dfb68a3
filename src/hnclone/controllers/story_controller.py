"""Story controller."""

import logging

from hnclone.controllers.result import ControllerResult
from hnclone.domain.story import Story
from hnclone.repositories.story_repo import StoryRepository
from hnclone.usecases import (
    FetchCategoryStories,
    FetchCategoryStoriesInput,
    FetchStoryDetails,
    FetchStoryDetailsInput,
    FetchTopStories,
    FetchTopStoriesInput,
)

logger = logging.getLogger(__name__)


class StoryController:
    """Runs story use cases and converts errors into failed results."""

    def __init__(self, story_repository: StoryRepository) -> None:
        self.fetch_top_stories_use_case = FetchTopStories(story_repository)
        self.fetch_story_details_use_case = FetchStoryDetails(story_repository)
        self.fetch_category_stories_use_case = FetchCategoryStories(story_repository)

    async def get_top_stories(self, limit: int | None = None) -> ControllerResult[list[Story]]:
        try:
            result = await self.fetch_top_stories_use_case.execute(
                FetchTopStoriesInput(limit=limit)
            )
            return ControllerResult(success=True, data=result.stories)
        except Exception as e:
            logger.error(f"Error in StoryController.get_top_stories: {e}")
            return ControllerResult(
                success=False, data=[], error="Failed to fetch top stories"
            )

    async def get_story_details(self, story_id: int) -> ControllerResult[Story | None]:
        try:
            result = await self.fetch_story_details_use_case.execute(
                FetchStoryDetailsInput(story_id=story_id)
            )
            return ControllerResult(success=True, data=result.story)
        except Exception as e:
            logger.error(f"Error in StoryController.get_story_details: {e}")
            return ControllerResult(
                success=False, data=None, error="Failed to fetch story details"
            )

    async def get_stories_by_category(
        self, category: str, limit: int | None = None
    ) -> ControllerResult[list[Story]]:
        try:
            result = await self.fetch_category_stories_use_case.execute(
                FetchCategoryStoriesInput(category=category, limit=limit)
            )
            return ControllerResult(success=True, data=result.stories)
        except Exception as e:
            logger.error(f"Error in StoryController.get_stories_by_category: {e}")
            return ControllerResult(
                success=False, data=[], error=f"Failed to fetch {category} stories"
            )
