"""Tests for the listing refresh scheduler."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from hnclone.controllers import CommentController, StoryController
from hnclone.hooks import DataHooks, RequestCache
from hnclone.repositories import CommentRepository, StoryRepository
from hnclone.scheduler.jobs import SchedulerService
from tests.conftest import make_fake_client, story_record


def _wired_hooks(hn_client: MagicMock) -> DataHooks:
    story_controller = StoryController(StoryRepository(hn_client))
    comment_controller = CommentController(CommentRepository(hn_client), story_controller)
    return DataHooks(story_controller, comment_controller, RequestCache())


class TestSchedulerService:
    def test_limit_defaults_to_settings(self):
        service = SchedulerService(MagicMock())
        assert service.limit == 30

    @pytest.mark.asyncio
    async def test_cold_cache_fetches_listing_once_per_tick(self):
        hn = make_fake_client({1: story_record(1), 2: story_record(2)})
        hn.get_top_story_ids.return_value = [1, 2]
        hooks = _wired_hooks(hn)
        service = SchedulerService(hooks, limit=5)

        await service._refresh_top_stories_job()

        assert hn.get_top_story_ids.await_count == 1
        assert hn.get_items.await_count == 1
        assert [vm.id for vm in hooks.cache.get(("top-stories", 5)).data] == [1, 2]

    @pytest.mark.asyncio
    async def test_warm_cache_is_refetched_once_per_tick(self):
        hn = make_fake_client({1: story_record(1)})
        hn.get_top_story_ids.return_value = [1]
        hooks = _wired_hooks(hn)
        await hooks.use_top_stories(5)
        service = SchedulerService(hooks, limit=5)

        await service._refresh_top_stories_job()

        assert hn.get_top_story_ids.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_refresh_is_stored_not_raised(self):
        hn = make_fake_client()
        hn.get_top_story_ids = AsyncMock(side_effect=RuntimeError("down"))
        hooks = _wired_hooks(hn)
        service = SchedulerService(hooks, limit=5)

        await service._refresh_top_stories_job()

        assert str(hooks.cache.get(("top-stories", 5)).error) == "Failed to fetch top stories"

    @pytest.mark.asyncio
    async def test_refresh_job_swallows_errors(self):
        hooks = MagicMock()
        hooks.refresh_top_stories = AsyncMock(side_effect=RuntimeError("down"))
        service = SchedulerService(hooks)

        await service._refresh_top_stories_job()

    @pytest.mark.asyncio
    async def test_start_and_shutdown(self):
        service = SchedulerService(MagicMock())

        service.start()
        job = service.scheduler.get_job("refresh_top_stories")
        assert job is not None
        assert job.trigger.interval.total_seconds() == 300

        service.shutdown()
        assert not service.scheduler.running

    def test_shutdown_when_not_started(self):
        service = SchedulerService(MagicMock())
        service.shutdown()
