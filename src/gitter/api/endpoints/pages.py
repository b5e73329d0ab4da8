# src/gitter/api/endpoints/pages.py
"""Static form pages served at friendly paths."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter(tags=["pages"])


@router.get("/login", response_class=FileResponse)
def login_page() -> FileResponse:
    """Serve the login form."""
    return FileResponse(STATIC_DIR / "login.html")


@router.get("/signup", response_class=FileResponse)
def signup_page() -> FileResponse:
    """Serve the sign-up form."""
    return FileResponse(STATIC_DIR / "signup.html")
