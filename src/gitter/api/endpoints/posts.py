# src/gitter/api/endpoints/posts.py
"""Post submission endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse

from gitter.api.dependencies import FormDep, PostServiceDep, form_text
from gitter.core.errors import MissingFieldError, StorageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])


@router.post("/post", status_code=status.HTTP_303_SEE_OTHER)
@router.post("/api/post", status_code=status.HTTP_303_SEE_OTHER)
def submit_post(
    posts: PostServiceDep,
    form: FormDep,
) -> RedirectResponse:
    """Append a message to the feed and send the browser back to it.

    Raises:
        HTTPException: 400 for a missing message, 500 if the insert fails
    """
    logger.info("Submitting post.")
    try:
        posts.submit(form_text(form, "message"))
    except MissingFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except StorageError as err:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
