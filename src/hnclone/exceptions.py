"""Exception hierarchy shared across the data-access layers."""


class HNCloneError(Exception):
    """Base class for hnclone errors."""


class HNApiError(HNCloneError):
    """Raised when the HN API answers with a non-success status."""

    def __init__(self, status: int, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(f"Hacker News API error: {status} {status_text}")


class StoryListingError(HNCloneError):
    """Raised when a story listing (top or category) cannot be fetched."""


class HookError(HNCloneError):
    """Raised by data hook fetchers when a controller reports failure."""
