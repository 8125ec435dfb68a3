"""Background job scheduler keeping listing caches warm."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from hnclone.config import get_settings
from hnclone.hooks import DataHooks

logger = logging.getLogger(__name__)
settings = get_settings()


class SchedulerService:
    """Polls the top stories listing on the listing refresh interval."""

    def __init__(self, hooks: DataHooks, limit: int | None = None) -> None:
        """Initialize the scheduler service.

        Args:
            hooks: Data hooks whose cache entries are refreshed
            limit: Listing size to keep warm (defaults to config)
        """
        self.hooks = hooks
        self.limit = limit or settings.top_stories_count
        self.scheduler = AsyncIOScheduler()

    async def _refresh_top_stories_job(self) -> None:
        """Revalidate the cached front page listing."""
        logger.info("Refreshing top stories...")
        try:
            entry = await self.hooks.refresh_top_stories(self.limit)
            if entry.error is not None:
                logger.warning(f"Top stories refresh failed: {entry.error}")
                return
            logger.info(f"Refreshed {len(entry.data or [])} top stories")
        except Exception as e:
            logger.error(f"Top stories refresh failed: {e}", exc_info=True)

    def start(self) -> None:
        """Start the scheduler with the polling job."""
        interval = settings.stories_refresh_seconds
        self.scheduler.add_job(
            self._refresh_top_stories_job,
            trigger=IntervalTrigger(seconds=interval),
            id="refresh_top_stories",
            name="Refresh Top Stories",
            replace_existing=True,
        )
        logger.info(f"Scheduled top stories refresh (every {interval}s)")
        self.scheduler.start()

    def shutdown(self) -> None:
        """Stop the scheduler if it is running."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")
