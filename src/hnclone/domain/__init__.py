"""Domain entities."""

from hnclone.domain.comment import Comment
from hnclone.domain.story import Story
from hnclone.domain.timeago import format_time_ago
from hnclone.domain.user import User

__all__ = [
    "Comment",
    "Story",
    "User",
    "format_time_ago",
]
