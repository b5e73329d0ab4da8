# src/gitter/api/endpoints/feed.py
"""Feed endpoint rendering the newest posts."""

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from gitter.api.dependencies import FeedServiceDep
from gitter.core.errors import StorageError
from gitter.services.feed import parse_page
from gitter.services.post_service import to_post_out

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["feed"])


@router.get("/", response_class=HTMLResponse)
def get_index(
    request: Request,
    feed: FeedServiceDep,
    page: str | None = Query(None, description="Feed page; non-numeric input means 0"),
) -> HTMLResponse:
    """Render the feed page.

    Args:
        request: Incoming request, needed by the template engine
        feed: Feed service bound to this request's session
        page: Raw ``page`` query parameter

    Returns:
        The rendered index template

    Raises:
        HTTPException: If the posts cannot be loaded or rendered
    """
    logger.info("Getting index.")
    requested_page = parse_page(page)
    try:
        posts = [to_post_out(post) for post in feed.list(requested_page)]
    except StorageError as err:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err

    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"posts": posts, "page": requested_page},
        )
    except TemplateError as err:
        logger.error("Error while executing template: %s", err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err
