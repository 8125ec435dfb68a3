"""Comment presenter and view model."""

from pydantic import BaseModel

from hnclone.domain.comment import Comment

PLACEHOLDER_AUTHOR = "Loading..."
PLACEHOLDER_TEXT = "Loading reply..."


class CommentViewModel(BaseModel):
    """Display-ready projection of a Comment.

    ``level`` is the nesting depth used for threaded rendering. Placeholders
    stand in for replies that have not been fetched yet.
    """

    id: int
    author: str
    time_ago: str
    text: str | None = None
    has_content: bool
    reply_count: int
    has_replies: bool
    level: int = 0
    is_placeholder: bool = False


class CommentPresenter:
    """Pure Comment -> CommentViewModel mapping."""

    @staticmethod
    def present(
        comment: Comment, level: int = 0, now: float | None = None
    ) -> CommentViewModel:
        return CommentViewModel(
            id=comment.id,
            author=comment.author,
            time_ago=comment.time_ago(now),
            text=comment.text,
            has_content=comment.has_content(),
            reply_count=comment.reply_count(),
            has_replies=comment.has_replies(),
            level=level,
        )

    @classmethod
    def present_multiple(
        cls, comments: list[Comment], level: int = 0, now: float | None = None
    ) -> list[CommentViewModel]:
        return [cls.present(comment, level, now) for comment in comments]

    @staticmethod
    def placeholder(comment_id: int, level: int) -> CommentViewModel:
        """View model for a reply that is still to be fetched."""
        return CommentViewModel(
            id=comment_id,
            author=PLACEHOLDER_AUTHOR,
            time_ago="",
            text=PLACEHOLDER_TEXT,
            has_content=True,
            reply_count=0,
            has_replies=False,
            level=level,
            is_placeholder=True,
        )

    @classmethod
    def present_with_replies(
        cls, comments: list[Comment], level: int = 0, now: float | None = None
    ) -> list[CommentViewModel]:
        """Flatten comments for threaded rendering.

        Each comment is followed by one placeholder per reply id at
        ``level + 1``; the replies themselves are fetched lazily.

        Args:
            comments: Comments at the current depth
            level: Nesting depth of ``comments``

        Returns:
            Flat list of view models carrying their level
        """
        result = []
        for comment in comments:
            result.append(cls.present(comment, level, now))
            result.extend(cls.placeholder(kid_id, level + 1) for kid_id in comment.kid_ids)
        return result
