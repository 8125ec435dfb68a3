"""User API endpoints."""

from fastapi import APIRouter, HTTPException

from hnclone.api.dependencies import UserRepoDep
from hnclone.api.v1.schemas import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, user_repo: UserRepoDep) -> UserResponse:
    """Get a user profile by handle."""
    user = await user_repo.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_user(user)
