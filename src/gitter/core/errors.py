"""Domain errors raised by the Gitter services.

Routes translate these into HTTP responses; the services never build
responses themselves.
"""

from __future__ import annotations


class GitterError(Exception):
    """Base class for all domain errors."""


class MissingFieldError(GitterError):
    """A required form field was absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing {field} form parameter")
        self.field = field


class InvalidUsernameError(GitterError):
    """No user is registered under the supplied username."""

    def __init__(self) -> None:
        super().__init__("Invalid username")


class InvalidPasswordError(GitterError):
    """The supplied password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__("Invalid password")


class UsernameTakenError(GitterError):
    """Another user already holds the requested username."""

    def __init__(self, username: str) -> None:
        super().__init__("Username already taken")
        self.username = username


class StorageError(GitterError):
    """The storage layer failed while serving a request."""
