"""API v1 router aggregator."""

from fastapi import APIRouter

from hnclone.api.v1.comments import router as comments_router
from hnclone.api.v1.stories import router as stories_router
from hnclone.api.v1.users import router as users_router

router = APIRouter(prefix="/api/v1")
router.include_router(stories_router)
router.include_router(comments_router)
router.include_router(users_router)
