"""Pydantic schemas for the Gitter forum."""

from .post import PostOut

__all__ = ["PostOut"]
