"""Presenters mapping entities to display-ready view models."""

from hnclone.presenters.comment_presenter import CommentPresenter, CommentViewModel
from hnclone.presenters.story_presenter import StoryPresenter, StoryViewModel

__all__ = [
    "CommentPresenter",
    "CommentViewModel",
    "StoryPresenter",
    "StoryViewModel",
]
