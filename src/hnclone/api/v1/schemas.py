"""Pydantic schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from hnclone.domain.user import User
from hnclone.presenters import CommentViewModel, StoryViewModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Controller result as returned over HTTP."""

    success: bool
    data: T
    error: str | None = None


StoryListResponse = Envelope[list[StoryViewModel]]
StoryDetailResponse = Envelope[StoryViewModel | None]
CommentListResponse = Envelope[list[CommentViewModel]]


class UserResponse(BaseModel):
    """Response schema for a user profile."""

    id: str
    karma: int
    created: int
    created_date: str
    account_age_days: int
    about: str | None = None
    has_about: bool
    submission_count: int

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            karma=user.karma,
            created=user.created,
            created_date=user.created_date(),
            account_age_days=user.account_age_days(),
            about=user.about,
            has_about=user.has_about(),
            submission_count=user.submission_count(),
        )
