"""HTMX-powered web views."""

import logging
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from hnclone.api.dependencies import HooksDep
from hnclone.config import get_settings
from hnclone.controllers.comment_controller import STORY_NOT_FOUND

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(tags=["web"])

templates = Jinja2Templates(directory=Path(__file__).resolve().parents[2] / "templates")

Category = Literal["top", "new", "best", "ask", "show", "jobs"]

SUBMIT_NOTICE = "Story submitted! (This is a demo, not actually submitted to Hacker News)"


def error_message(error: Exception | None) -> str | None:
    """Text shown after "Error: " for a failed hook, None when there is none."""
    if error is None:
        return None
    return str(error) or error.__class__.__name__


def _render_index(request: Request, hooks: HooksDep, category: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            "active_category": category,
            "hx_trigger": hooks.listing_policy.hx_trigger(),
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, hooks: HooksDep) -> HTMLResponse:
    """Render the front page shell; the list loads via HTMX."""
    return _render_index(request, hooks, "top")


@router.get("/stories/list", response_class=HTMLResponse)
async def story_list(
    request: Request,
    hooks: HooksDep,
    category: Category = "top",
) -> HTMLResponse:
    """HTMX endpoint returning the story list partial for a category."""
    limit = settings.top_stories_count
    if category == "top":
        response = await hooks.use_top_stories(limit)
    else:
        response = await hooks.use_category_stories(category, limit)

    return templates.TemplateResponse(
        request=request,
        name="partials/story_list.html",
        context={
            "stories": response.data or [],
            "error": error_message(response.error),
            "is_loading": response.is_loading,
        },
    )


@router.get("/item/{story_id}", response_class=HTMLResponse)
async def item_detail(request: Request, story_id: int, hooks: HooksDep) -> HTMLResponse:
    """Render a story with its top-level comments."""
    details = await hooks.use_story_details(story_id)
    error = error_message(details.error)
    not_found = details.story is None and error in (None, STORY_NOT_FOUND)

    return templates.TemplateResponse(
        request=request,
        name="item.html",
        context={
            "story": details.story,
            "comments": details.comments,
            "error": None if not_found else error,
            "not_found": not_found,
            "is_loading": details.is_loading,
        },
        status_code=404 if not_found else 200,
    )


@router.get("/comments/{comment_id}", response_class=HTMLResponse)
async def comment_thread(
    request: Request,
    comment_id: int,
    hooks: HooksDep,
    level: int = 0,
) -> HTMLResponse:
    """HTMX endpoint replacing a reply placeholder with the real comment."""
    response = await hooks.use_comment_thread(comment_id, level)
    return templates.TemplateResponse(
        request=request,
        name="partials/comment_list.html",
        context={
            "comments": response.data or [],
            "error": error_message(response.error),
        },
    )


@router.get("/submit", response_class=HTMLResponse)
async def submit_form(request: Request) -> HTMLResponse:
    """Render the (demo) submission form."""
    return templates.TemplateResponse(
        request=request,
        name="submit.html",
        context={"notice": None},
    )


@router.post("/submit", response_class=HTMLResponse)
async def submit_story(
    request: Request,
    title: str = Form(...),
    url: str = Form(""),
    text: str = Form(""),
) -> HTMLResponse:
    """Accept a submission without sending it anywhere."""
    logger.info(f"Submitted (demo only): title={title!r}, url={url!r}, text={text!r}")
    return templates.TemplateResponse(
        request=request,
        name="submit.html",
        context={"notice": SUBMIT_NOTICE},
    )


@router.get("/{category}", response_class=HTMLResponse)
async def category_page(
    request: Request,
    category: Literal["new", "best", "ask", "show", "jobs"],
    hooks: HooksDep,
) -> HTMLResponse:
    """Render a category page shell."""
    return _render_index(request, hooks, category)
