"""User registration and credential checks."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from gitter.core import security
from gitter.core.errors import (
    InvalidPasswordError,
    InvalidUsernameError,
    MissingFieldError,
    StorageError,
    UsernameTakenError,
)
from gitter.core.settings import Settings, settings as default_settings
from gitter.models.user import User
from gitter.repositories.user_repo import UserRepository
from gitter.services.post_service import generate_id

logger = logging.getLogger(__name__)


def _require(username: str | None, password: str | None) -> tuple[str, str]:
    if not username:
        raise MissingFieldError("username")
    if not password:
        raise MissingFieldError("password")
    return username, password


def _violates_username(err: IntegrityError) -> bool:
    """Return True if ``err`` comes from the unique index on ``users.username``.

    A collision on the random primary key is a plain storage failure.
    """
    message = str(err.orig).lower()
    return "username" in message and "users.id" not in message


class AuthService:
    """Register users and verify their passwords."""

    def __init__(self, repo: UserRepository, settings: Settings | None = None) -> None:
        self.repo = repo
        self.settings = settings or default_settings

    def register(self, username: str | None, password: str | None) -> User:
        """Create a user with a password hash salted by its random id.

        Raises:
            MissingFieldError: If either field is absent or empty.
            UsernameTakenError: If the username is already registered.
            StorageError: If the insert fails for any other reason.
        """
        username, password = _require(username, password)
        user_id = generate_id()
        hashed = security.hash_password(password, user_id, self.settings)
        try:
            return self.repo.create(
                user_id=user_id,
                username=username,
                hashed_password=hashed,
            )
        except IntegrityError as err:
            self.repo.session.rollback()
            if _violates_username(err):
                raise UsernameTakenError(username) from err
            logger.exception("Failed to insert user")
            raise StorageError("Failed to insert user") from err
        except SQLAlchemyError as err:
            self.repo.session.rollback()
            logger.exception("Failed to insert user")
            raise StorageError("Failed to insert user") from err

    def login(self, username: str | None, password: str | None) -> User:
        """Return the user if ``password`` matches the stored hash.

        Raises:
            MissingFieldError: If either field is absent or empty.
            InvalidUsernameError: If no user has this username.
            InvalidPasswordError: If the password does not match.
            StorageError: If the lookup fails.
        """
        username, password = _require(username, password)
        try:
            user = self.repo.get_by_username(username)
        except SQLAlchemyError as err:
            logger.exception("Failed to find user")
            raise StorageError("Failed to find user") from err
        if user is None:
            raise InvalidUsernameError()
        if not security.verify_password(password, user.id, user.hashed_password, self.settings):
            raise InvalidPasswordError()
        return user
