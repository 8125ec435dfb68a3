"""User repository backed by the HN API."""

import logging

from hnclone.domain.user import User
from hnclone.infrastructure.hn_client import HNApiClient

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for fetching HN user profiles."""

    def __init__(self, client: HNApiClient) -> None:
        """Initialize repository with an HN API client."""
        self.client = client

    async def get_user_by_id(self, user_id: str) -> User | None:
        try:
            data = await self.client.get_user(user_id)
        except Exception as e:
            logger.error(f"Error fetching user {user_id}: {e}")
            return None

        if not data:
            return None
        return User.from_hn_api(data)

    async def get_users_by_ids(self, user_ids: list[str]) -> list[User]:
        if not user_ids:
            return []

        try:
            records = await self.client.get_users(user_ids)
        except Exception as e:
            logger.error(f"Error fetching users by IDs: {e}")
            return []

        return [User.from_hn_api(data) for data in records if data]

    async def search_users(self, query: str, limit: int = 10) -> list[User]:
        """Search users by handle.

        The HN API has no search endpoint, so this always returns [].
        """
        logger.warning(f"User search is not supported by the HN API (query={query!r})")
        return []
