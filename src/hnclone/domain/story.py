"""Story domain entity."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from hnclone.domain.timeago import format_time_ago


@dataclass(frozen=True)
class Story:
    """Represents a Hacker News story."""

    id: int
    title: str
    score: int
    by: str
    time: int
    url: str | None = None
    descendants: int | None = None
    text: str | None = None
    kids: tuple[int, ...] | None = None

    @staticmethod
    def _sanitize_url(url: str | None) -> str | None:
        """Reject non-HTTP(S) URLs to prevent javascript: XSS."""
        if not url:
            return None
        scheme = urlparse(url).scheme.lower()
        if scheme in ("http", "https"):
            return url
        return None

    @classmethod
    def from_hn_api(cls, data: dict[str, Any]) -> "Story":
        """Create Story from HN API item record."""
        kids = data.get("kids")
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            score=data.get("score") or 0,
            by=data.get("by") or "unknown",
            time=data.get("time") or 0,
            url=cls._sanitize_url(data.get("url")),
            descendants=data.get("descendants"),
            text=data.get("text"),
            kids=tuple(kids) if kids is not None else None,
        )

    @property
    def comment_count(self) -> int:
        """Number of descendant comments, zero when unknown."""
        return self.descendants or 0

    @property
    def kid_ids(self) -> list[int]:
        """Immediate child comment ids, empty when absent."""
        return list(self.kids or ())

    def time_ago(self, now: float | None = None) -> str:
        """Relative age label, e.g. "3 hours ago"."""
        return format_time_ago(self.time, now)

    def has_external_url(self) -> bool:
        """Check if the story links to an external page."""
        return bool(self.url)

    def display_url(self) -> str:
        """External url if present, otherwise the item detail path."""
        return self.url or f"/item/{self.id}"

    def has_comments(self) -> bool:
        return self.comment_count > 0
