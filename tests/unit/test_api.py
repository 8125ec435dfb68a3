"""Tests for the JSON API."""

from unittest.mock import AsyncMock, patch

import pytest

from hnclone.repositories import CommentRepository
from tests.conftest import comment_record, make_fake_client, story_record


class TestStoriesApi:
    @pytest.mark.asyncio
    async def test_top_stories(self, client_factory):
        hn = make_fake_client({1: story_record(1), 2: story_record(2)})
        hn.get_top_story_ids.return_value = [1, 2, 3]
        http = client_factory(hn)

        response = await http.get("/api/v1/stories", params={"limit": 2})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert [s["id"] for s in body["data"]] == [1, 2]
        hn.get_items.assert_awaited_once_with([1, 2])

    @pytest.mark.asyncio
    async def test_top_stories_failure_envelope(self, client_factory):
        hn = make_fake_client()
        hn.get_top_story_ids.side_effect = RuntimeError("down")
        http = client_factory(hn)

        body = (await http.get("/api/v1/stories")).json()

        assert body == {"success": False, "data": [], "error": "Failed to fetch top stories"}

    @pytest.mark.asyncio
    async def test_limit_validation(self, client_factory, fake_client):
        http = client_factory(fake_client)

        response = await http.get("/api/v1/stories", params={"limit": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_category(self, client_factory, fake_client):
        http = client_factory(fake_client)

        body = (await http.get("/api/v1/stories/category/trending")).json()

        assert body["success"] is False
        assert body["error"] == "Failed to fetch trending stories"

    @pytest.mark.asyncio
    async def test_story_detail(self, client_factory):
        hn = make_fake_client({8: story_record(8, url="javascript:alert(1)")})
        http = client_factory(hn)

        body = (await http.get("/api/v1/stories/8")).json()

        assert body["data"]["id"] == 8
        assert body["data"]["url"] is None
        assert body["data"]["display_url"] == "/item/8"

    @pytest.mark.asyncio
    async def test_story_detail_not_found(self, client_factory, fake_client):
        http = client_factory(fake_client)

        response = await http.get("/api/v1/stories/8")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_story_comments(self, client_factory):
        hn = make_fake_client({8: story_record(8, kids=[1]), 1: comment_record(1)})
        http = client_factory(hn)

        body = (await http.get("/api/v1/stories/8/comments")).json()

        assert [c["id"] for c in body["data"]] == [1]

    @pytest.mark.asyncio
    async def test_story_comments_missing_story(self, client_factory, fake_client):
        http = client_factory(fake_client)

        body = (await http.get("/api/v1/stories/8/comments")).json()

        assert body == {"success": False, "data": [], "error": "Story not found"}


class TestCommentsApi:
    @pytest.mark.asyncio
    async def test_comments_by_ids(self, client_factory):
        hn = make_fake_client({1: comment_record(1), 2: comment_record(2, deleted=True)})
        http = client_factory(hn)

        body = (await http.get("/api/v1/comments", params=[("ids", 1), ("ids", 2)])).json()

        assert [c["id"] for c in body["data"]] == [1]

    @pytest.mark.asyncio
    async def test_replies(self, client_factory):
        hn = make_fake_client({1: comment_record(1, kids=[2]), 2: comment_record(2)})
        http = client_factory(hn)

        body = (await http.get("/api/v1/comments/1/replies", params={"level": 3})).json()

        assert [(c["id"], c["level"]) for c in body["data"]] == [(2, 3)]

    @pytest.mark.asyncio
    async def test_replies_failure_envelope(self, client_factory, fake_client):
        http = client_factory(fake_client)
        failing = AsyncMock(side_effect=RuntimeError("boom"))

        with patch.object(CommentRepository, "get_comment_replies", failing):
            body = (await http.get("/api/v1/comments/1/replies")).json()

        assert body == {
            "success": False,
            "data": [],
            "error": "Failed to fetch comment replies",
        }


class TestUsersApi:
    @pytest.mark.asyncio
    async def test_user(self, client_factory, fake_client):
        fake_client.get_user.return_value = {
            "id": "pg",
            "created": 1_160_418_092,
            "karma": 155_000,
            "about": "Bug fixer.",
            "submitted": [1, 2, 3],
        }
        http = client_factory(fake_client)

        body = (await http.get("/api/v1/users/pg")).json()

        assert body["id"] == "pg"
        assert body["created_date"] == "2006-10-09"
        assert body["submission_count"] == 3
        assert body["has_about"] is True

    @pytest.mark.asyncio
    async def test_missing_user(self, client_factory, fake_client):
        http = client_factory(fake_client)

        response = await http.get("/api/v1/users/nobody")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}
