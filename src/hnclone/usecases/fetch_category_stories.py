"""Fetch a named story listing (new, best, ask, show, jobs)."""

from dataclasses import dataclass

from hnclone.repositories.story_repo import DEFAULT_LIMIT, StoryRepository
from hnclone.usecases.fetch_top_stories import FetchTopStoriesOutput


@dataclass
class FetchCategoryStoriesInput:
    category: str
    limit: int | None = None


class FetchCategoryStories:
    """Fetch stories from a category listing, defaulting the limit to 30."""

    def __init__(self, story_repository: StoryRepository) -> None:
        self.story_repository = story_repository

    async def execute(self, data: FetchCategoryStoriesInput) -> FetchTopStoriesOutput:
        limit = data.limit or DEFAULT_LIMIT
        stories = await self.story_repository.get_stories_by_category(
            data.category, limit
        )
        return FetchTopStoriesOutput(stories=list(stories))
