"""Data access helpers for working with users."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from gitter.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Thin wrapper around database access for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_username(self, username: str) -> User | None:
        """Return the user registered under ``username``."""
        result = self.session.execute(select(User).where(User.username == username))
        return result.scalars().first()

    def create(self, *, user_id: int, username: str, hashed_password: bytes) -> User:
        """Insert a new user and commit it."""
        user = User(id=user_id, username=username, hashed_password=hashed_password)
        self.session.add(user)
        self.session.commit()
        return user
