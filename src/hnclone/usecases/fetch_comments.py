"""Fetch a list of comments by id."""

import dataclasses
from dataclasses import dataclass, field

from hnclone.domain.comment import Comment
from hnclone.repositories.comment_repo import CommentRepository


@dataclass
class FetchCommentsInput:
    comment_ids: list[int] | None = None


@dataclass
class FetchCommentsOutput:
    comments: list[Comment] = field(default_factory=list)


class FetchComments:
    """Fetch comments, short-circuiting empty input without a repository call."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, data: FetchCommentsInput) -> FetchCommentsOutput:
        comment_ids = data.comment_ids
        if not comment_ids or not isinstance(comment_ids, list | tuple):
            return FetchCommentsOutput(comments=[])

        comments = await self.comment_repository.get_comments_by_ids(list(comment_ids))
        if not isinstance(comments, list):
            return FetchCommentsOutput(comments=[])

        return FetchCommentsOutput(
            comments=[dataclasses.replace(comment) for comment in comments]
        )
