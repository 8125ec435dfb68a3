"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from hnclone.api.dependencies import Container
from hnclone.infrastructure.hn_client import HNApiClient

NOW = 1_700_000_000


def story_record(item_id: int, **overrides: Any) -> dict[str, Any]:
    """Raw HN API story record."""
    record = {
        "id": item_id,
        "type": "story",
        "title": f"Story {item_id}",
        "score": 10,
        "by": "author",
        "time": NOW - 3600,
        "descendants": 0,
    }
    record.update(overrides)
    return record


def comment_record(item_id: int, **overrides: Any) -> dict[str, Any]:
    """Raw HN API comment record."""
    record = {
        "id": item_id,
        "type": "comment",
        "by": "commenter",
        "text": f"Comment {item_id}",
        "time": NOW - 120,
        "parent": 1,
    }
    record.update(overrides)
    return record


def make_fake_client(items: dict[int, Any] | None = None) -> MagicMock:
    """HNApiClient stand-in serving raw records from a dict."""
    items = items or {}
    client = MagicMock(spec=HNApiClient)

    async def get_item(item_id):
        return items.get(item_id)

    async def get_items(item_ids):
        return [items.get(iid) for iid in item_ids]

    client.get_item = AsyncMock(side_effect=get_item)
    client.get_items = AsyncMock(side_effect=get_items)
    client.get_top_story_ids = AsyncMock(return_value=[])
    client.get_new_story_ids = AsyncMock(return_value=[])
    client.get_best_story_ids = AsyncMock(return_value=[])
    client.get_ask_story_ids = AsyncMock(return_value=[])
    client.get_show_story_ids = AsyncMock(return_value=[])
    client.get_job_story_ids = AsyncMock(return_value=[])
    client.get_user = AsyncMock(return_value=None)
    client.get_users = AsyncMock(return_value=[])
    client.close = AsyncMock()
    return client


@pytest.fixture
def fake_client() -> MagicMock:
    """Fake client with an empty item store."""
    return make_fake_client()


@pytest.fixture
async def client_factory() -> AsyncGenerator:
    """Build an httpx client for an app wired to the given fake HN client."""
    from hnclone.main import create_app

    clients: list[AsyncClient] = []

    def factory(hn_client: MagicMock) -> AsyncClient:
        app = create_app(container=Container.build(client=hn_client))
        http = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(http)
        return http

    yield factory

    for http in clients:
        await http.aclose()
