"""Fetch a single story for the detail view."""

import dataclasses
from dataclasses import dataclass

from hnclone.domain.story import Story
from hnclone.repositories.story_repo import StoryRepository


@dataclass
class FetchStoryDetailsInput:
    story_id: int


@dataclass
class FetchStoryDetailsOutput:
    story: Story | None = None


class FetchStoryDetails:
    """Look up one story; a missing story is reported as None, not an error."""

    def __init__(self, story_repository: StoryRepository) -> None:
        self.story_repository = story_repository

    async def execute(self, data: FetchStoryDetailsInput) -> FetchStoryDetailsOutput:
        story = await self.story_repository.get_story_by_id(data.story_id)
        if not story:
            return FetchStoryDetailsOutput(story=None)
        return FetchStoryDetailsOutput(story=dataclasses.replace(story))
