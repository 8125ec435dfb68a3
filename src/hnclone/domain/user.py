"""User domain entity."""

import math
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from hnclone.domain.timeago import DAY


@dataclass(frozen=True)
class User:
    """Represents a Hacker News user profile."""

    id: str
    created: int
    karma: int
    delay: int | None = None
    about: str | None = None
    submitted: tuple[int, ...] | None = None

    @classmethod
    def from_hn_api(cls, data: dict[str, Any]) -> "User":
        """Create User from HN API user record."""
        submitted = data.get("submitted")
        return cls(
            id=data["id"],
            created=data.get("created") or 0,
            karma=data.get("karma") or 0,
            delay=data.get("delay"),
            about=data.get("about"),
            submitted=tuple(submitted) if submitted is not None else None,
        )

    def account_age_days(self, now: float | None = None) -> int:
        """Whole days since account creation, never negative.

        Args:
            now: Reference epoch seconds (defaults to the current time)

        Returns:
            Floored age in days, clamped to 0 for future timestamps
        """
        if now is None:
            now = time.time()
        return max(0, math.floor((now - self.created) / DAY))

    def created_date(self) -> str:
        """Account creation date as YYYY-MM-DD (UTC)."""
        return datetime.fromtimestamp(self.created, tz=UTC).date().isoformat()

    def has_submissions(self) -> bool:
        return self.submission_count() > 0

    def submission_count(self) -> int:
        return len(self.submitted or ())

    def has_about(self) -> bool:
        """Check if the user has a non-blank bio."""
        return self.about is not None and self.about.strip() != ""
