# src/gitter/models/__init__.py
"""SQLAlchemy models for the Gitter forum."""

from .post import Post
from .user import User

__all__ = ["Post", "User"]
