"""Fetch the front page listing."""

from dataclasses import dataclass, field

from hnclone.domain.story import Story
from hnclone.repositories.story_repo import DEFAULT_LIMIT, StoryRepository


@dataclass
class FetchTopStoriesInput:
    limit: int | None = None


@dataclass
class FetchTopStoriesOutput:
    stories: list[Story] = field(default_factory=list)


class FetchTopStories:
    """Fetch top stories, defaulting the limit to 30."""

    def __init__(self, story_repository: StoryRepository) -> None:
        self.story_repository = story_repository

    async def execute(self, data: FetchTopStoriesInput) -> FetchTopStoriesOutput:
        limit = data.limit or DEFAULT_LIMIT
        stories = await self.story_repository.get_top_stories(limit)
        return FetchTopStoriesOutput(stories=list(stories))
