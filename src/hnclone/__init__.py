"""hnclone - a read-only Hacker News web client."""

__version__ = "0.1.0"
