"""Comment API endpoints."""

from fastapi import APIRouter, Query

from hnclone.api.dependencies import CommentControllerDep
from hnclone.api.v1.schemas import CommentListResponse
from hnclone.presenters import CommentPresenter

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=CommentListResponse)
async def list_comments(
    controller: CommentControllerDep,
    ids: list[int] = Query([]),
) -> CommentListResponse:
    """Get comments by ID, skipping deleted and dead ones."""
    result = await controller.get_comments(ids)
    return CommentListResponse(
        success=result.success,
        data=CommentPresenter.present_multiple(result.data),
        error=result.error,
    )


@router.get("/{comment_id}/replies", response_model=CommentListResponse)
async def list_replies(
    comment_id: int,
    controller: CommentControllerDep,
    level: int = Query(1, ge=0),
) -> CommentListResponse:
    """Get the direct replies to a comment."""
    result = await controller.get_comment_replies(comment_id)
    return CommentListResponse(
        success=result.success,
        data=CommentPresenter.present_multiple(result.data, level),
        error=result.error,
    )
