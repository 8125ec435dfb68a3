"""Composition root and FastAPI dependency providers."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from hnclone.config import Settings, get_settings
from hnclone.controllers import CommentController, StoryController
from hnclone.hooks import DataHooks, RequestCache
from hnclone.infrastructure.hn_client import HNApiClient
from hnclone.repositories import CommentRepository, StoryRepository, UserRepository


@dataclass
class Container:
    """Explicitly wired application services, one set per app instance."""

    client: HNApiClient
    story_repo: StoryRepository
    comment_repo: CommentRepository
    user_repo: UserRepository
    story_controller: StoryController
    comment_controller: CommentController
    hooks: DataHooks

    @classmethod
    def build(
        cls,
        settings: Settings | None = None,
        client: HNApiClient | None = None,
    ) -> "Container":
        """Wire client -> repositories -> controllers -> hooks.

        Args:
            settings: Settings to read tuning values from (defaults to config)
            client: HN API client to use (defaults to a new one from settings)

        Returns:
            Fully wired container
        """
        settings = settings or get_settings()
        client = client or HNApiClient(
            base_url=settings.hn_api_base_url,
            max_concurrent=settings.hn_max_concurrent_requests,
            timeout_seconds=settings.hn_request_timeout_seconds,
        )
        story_repo = StoryRepository(client)
        comment_repo = CommentRepository(client)
        story_controller = StoryController(story_repo)
        comment_controller = CommentController(comment_repo, story_lookup=story_controller)
        hooks = DataHooks(
            story_controller,
            comment_controller,
            RequestCache(dedupe_interval=settings.cache_dedupe_seconds),
            refresh_seconds=settings.stories_refresh_seconds,
        )
        return cls(
            client=client,
            story_repo=story_repo,
            comment_repo=comment_repo,
            user_repo=UserRepository(client),
            story_controller=story_controller,
            comment_controller=comment_controller,
            hooks=hooks,
        )


def get_container(request: Request) -> Container:
    """Provide the container attached to the running app."""
    return request.app.state.container


def get_story_controller(request: Request) -> StoryController:
    return get_container(request).story_controller


def get_comment_controller(request: Request) -> CommentController:
    return get_container(request).comment_controller


def get_user_repository(request: Request) -> UserRepository:
    return get_container(request).user_repo


def get_hooks(request: Request) -> DataHooks:
    return get_container(request).hooks


# Type aliases for commonly used dependencies
StoryControllerDep = Annotated[StoryController, Depends(get_story_controller)]
CommentControllerDep = Annotated[CommentController, Depends(get_comment_controller)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
HooksDep = Annotated[DataHooks, Depends(get_hooks)]
