"""Story presenter and view model."""

from pydantic import BaseModel

from hnclone.domain.story import Story


class StoryViewModel(BaseModel):
    """Display-ready projection of a Story."""

    id: int
    title: str
    url: str | None = None
    score: int
    author: str
    time_ago: str
    comment_count: int
    has_external_url: bool
    display_url: str
    text: str | None = None


class StoryPresenter:
    """Pure Story -> StoryViewModel mapping."""

    @staticmethod
    def present(story: Story, now: float | None = None) -> StoryViewModel:
        return StoryViewModel(
            id=story.id,
            title=story.title,
            url=story.url,
            score=story.score,
            author=story.by,
            time_ago=story.time_ago(now),
            comment_count=story.comment_count,
            has_external_url=story.has_external_url(),
            display_url=story.display_url(),
            text=story.text,
        )

    @classmethod
    def present_multiple(
        cls, stories: list[Story], now: float | None = None
    ) -> list[StoryViewModel]:
        return [cls.present(story, now) for story in stories]
