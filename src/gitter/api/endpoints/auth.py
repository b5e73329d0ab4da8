# src/gitter/api/endpoints/auth.py
"""Sign-up and login endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse

from gitter.api.dependencies import AuthServiceDep, FormDep, form_text
from gitter.core.errors import (
    InvalidPasswordError,
    InvalidUsernameError,
    MissingFieldError,
    StorageError,
    UsernameTakenError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/signUp", status_code=status.HTTP_303_SEE_OTHER)
def sign_up(
    auth: AuthServiceDep,
    form: FormDep,
) -> RedirectResponse:
    """Register a new user."""
    logger.info("Signing up.")
    try:
        auth.register(form_text(form, "username"), form_text(form, "password"))
    except MissingFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except UsernameTakenError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err
    except StorageError as err:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/login", status_code=status.HTTP_303_SEE_OTHER)
def login(
    auth: AuthServiceDep,
    form: FormDep,
) -> RedirectResponse:
    """Check a username/password pair."""
    logger.info("Logging in.")
    try:
        auth.login(form_text(form, "username"), form_text(form, "password"))
    except MissingFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except (InvalidUsernameError, InvalidPasswordError) as err:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(err)) from err
    except StorageError as err:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
