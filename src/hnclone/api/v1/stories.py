"""Story API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from hnclone.api.dependencies import CommentControllerDep, StoryControllerDep
from hnclone.api.v1.schemas import (
    CommentListResponse,
    StoryDetailResponse,
    StoryListResponse,
)
from hnclone.presenters import CommentPresenter, StoryPresenter

router = APIRouter(prefix="/stories", tags=["stories"])


@router.get("", response_model=StoryListResponse)
async def list_top_stories(
    controller: StoryControllerDep,
    limit: int = Query(30, ge=1, le=500),
) -> StoryListResponse:
    """List the front page stories."""
    result = await controller.get_top_stories(limit)
    return StoryListResponse(
        success=result.success,
        data=StoryPresenter.present_multiple(result.data),
        error=result.error,
    )


@router.get("/category/{category}", response_model=StoryListResponse)
async def list_category_stories(
    category: str,
    controller: StoryControllerDep,
    limit: int = Query(30, ge=1, le=500),
) -> StoryListResponse:
    """List stories of a category (new, best, ask, show, jobs)."""
    result = await controller.get_stories_by_category(category, limit)
    return StoryListResponse(
        success=result.success,
        data=StoryPresenter.present_multiple(result.data),
        error=result.error,
    )


@router.get("/{story_id}", response_model=StoryDetailResponse)
async def get_story(
    story_id: int,
    controller: StoryControllerDep,
) -> StoryDetailResponse:
    """Get a single story by ID."""
    result = await controller.get_story_details(story_id)
    if result.success and result.data is None:
        raise HTTPException(status_code=404, detail="Story not found")
    return StoryDetailResponse(
        success=result.success,
        data=StoryPresenter.present(result.data) if result.data else None,
        error=result.error,
    )


@router.get("/{story_id}/comments", response_model=CommentListResponse)
async def get_story_comments(
    story_id: int,
    controller: CommentControllerDep,
) -> CommentListResponse:
    """Get the top-level comments of a story."""
    result = await controller.get_comments_for_story(story_id)
    return CommentListResponse(
        success=result.success,
        data=CommentPresenter.present_multiple(result.data),
        error=result.error,
    )
