"""Application use cases, one repository call each."""

from hnclone.usecases.fetch_category_stories import (
    FetchCategoryStories,
    FetchCategoryStoriesInput,
)
from hnclone.usecases.fetch_comments import (
    FetchComments,
    FetchCommentsInput,
    FetchCommentsOutput,
)
from hnclone.usecases.fetch_story_details import (
    FetchStoryDetails,
    FetchStoryDetailsInput,
    FetchStoryDetailsOutput,
)
from hnclone.usecases.fetch_top_stories import (
    FetchTopStories,
    FetchTopStoriesInput,
    FetchTopStoriesOutput,
)

__all__ = [
    "FetchCategoryStories",
    "FetchCategoryStoriesInput",
    "FetchComments",
    "FetchCommentsInput",
    "FetchCommentsOutput",
    "FetchStoryDetails",
    "FetchStoryDetailsInput",
    "FetchStoryDetailsOutput",
    "FetchTopStories",
    "FetchTopStoriesInput",
    "FetchTopStoriesOutput",
]
