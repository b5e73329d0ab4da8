"""Shared API dependencies wiring services to the request."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException

from gitter.api.errors import MALFORMED_FORM
from gitter.core.settings import Settings
from gitter.db.session import get_db
from gitter.repositories import PostRepository, UserRepository
from gitter.services import AuthService, FeedService, PageCounter, PostIngestionService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_page_counter(request: Request) -> PageCounter:
    """Return the page counter owned by the application."""
    return request.app.state.page_counter


SettingsDep = Annotated[Settings, Depends(get_settings)]
PageCounterDep = Annotated[PageCounter, Depends(get_page_counter)]


def get_feed_service(
    db: SessionDep,
    counter: PageCounterDep,
    settings: SettingsDep,
) -> FeedService:
    return FeedService(PostRepository(db), counter, page_size=settings.page_size)


def get_post_service(db: SessionDep, counter: PageCounterDep) -> PostIngestionService:
    return PostIngestionService(PostRepository(db), counter)


def get_auth_service(db: SessionDep, settings: SettingsDep) -> AuthService:
    return AuthService(UserRepository(db), settings)


FeedServiceDep = Annotated[FeedService, Depends(get_feed_service)]
PostServiceDep = Annotated[PostIngestionService, Depends(get_post_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"


def _malformed() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MALFORMED_FORM)


def _boundary(content_type: str) -> bytes | None:
    for option in content_type.split(";")[1:]:
        name, _, value = option.strip().partition("=")
        if name.lower() == "boundary" and value:
            return value.strip('"').encode("latin-1")
    return None


async def get_form(request: Request) -> FormData:
    """Parse the request body as form fields.

    An empty body yields an empty form so that missing fields are reported
    by name. A body that is not form-encoded, or a multipart body without
    its closing delimiter, is rejected as malformed.
    """
    body = await request.body()
    if not body:
        return FormData()

    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    if media_type == MULTIPART:
        boundary = _boundary(content_type)
        if boundary is None or b"--" + boundary + b"--" not in body:
            raise _malformed()
    elif media_type == URLENCODED:
        try:
            body.decode("utf-8")
        except UnicodeDecodeError as err:
            raise _malformed() from err
    else:
        raise _malformed()

    try:
        return await request.form()
    except StarletteHTTPException as err:
        # Starlette reports multipart parser failures as a bare 400.
        raise _malformed() from err


FormDep = Annotated[FormData, Depends(get_form)]


def form_text(form: FormData, field: str) -> str | None:
    """Return a text field from ``form``; file uploads count as absent."""
    value = form.get(field)
    return value if isinstance(value, str) else None
