"""Comment domain entity."""

from dataclasses import dataclass
from typing import Any

from hnclone.domain.timeago import format_time_ago

ANONYMOUS_AUTHOR = "anonymous"


@dataclass(frozen=True)
class Comment:
    """Represents a Hacker News comment."""

    id: int
    time: int
    by: str | None = None
    text: str | None = None
    kids: tuple[int, ...] | None = None
    parent: int | None = None
    deleted: bool | None = None
    dead: bool | None = None

    @classmethod
    def from_hn_api(cls, data: dict[str, Any]) -> "Comment":
        """Create Comment from HN API item record."""
        kids = data.get("kids")
        return cls(
            id=data["id"],
            time=data.get("time") or 0,
            by=data.get("by"),
            text=data.get("text"),
            kids=tuple(kids) if kids is not None else None,
            parent=data.get("parent"),
            deleted=data.get("deleted"),
            dead=data.get("dead"),
        )

    @property
    def author(self) -> str:
        """Author handle, "anonymous" when missing or empty."""
        return self.by or ANONYMOUS_AUTHOR

    @property
    def kid_ids(self) -> list[int]:
        return list(self.kids or ())

    def time_ago(self, now: float | None = None) -> str:
        return format_time_ago(self.time, now)

    def has_content(self) -> bool:
        """A comment has content if it is live and its text is not blank."""
        return (
            not self.deleted
            and not self.dead
            and self.text is not None
            and self.text.strip() != ""
        )

    def has_replies(self) -> bool:
        return self.reply_count() > 0

    def reply_count(self) -> int:
        return len(self.kids or ())
