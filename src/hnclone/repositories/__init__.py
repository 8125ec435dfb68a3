"""Repositories mapping HN API records to domain entities."""

from hnclone.repositories.comment_repo import CommentRepository
from hnclone.repositories.story_repo import StoryRepository
from hnclone.repositories.user_repo import UserRepository

__all__ = [
    "CommentRepository",
    "StoryRepository",
    "UserRepository",
]
