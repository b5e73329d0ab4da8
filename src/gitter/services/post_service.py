"""Service-level helpers for creating posts."""
from __future__ import annotations

import logging
import secrets

from sqlalchemy.exc import SQLAlchemyError

from gitter.core.errors import MissingFieldError, StorageError
from gitter.models.post import Post
from gitter.repositories.post_repo import PostRepository
from gitter.schemas.post import PostOut
from gitter.services.page_counter import PageCounter

logger = logging.getLogger(__name__)


def generate_id() -> int:
    """Return a random non-negative 63-bit identifier."""
    return secrets.randbits(63)


class PostIngestionService:
    """Assign page numbers and append posts."""

    def __init__(self, repo: PostRepository, counter: PageCounter) -> None:
        self.repo = repo
        self.counter = counter

    def submit(self, content: str | None) -> Post:
        """Persist ``content`` as the next post.

        Args:
            content: Message text from the submission form.

        Returns:
            The stored post.

        Raises:
            MissingFieldError: If ``content`` is absent or empty. The counter
                is left untouched.
            StorageError: If the insert fails. The page number already taken
                is not returned to the counter, so the sequence keeps a gap.
        """
        if not content:
            raise MissingFieldError("message")

        post_id = generate_id()
        page = self.counter.next()
        try:
            return self.repo.create(post_id=post_id, page=page, content=content)
        except SQLAlchemyError as err:
            self.repo.session.rollback()
            logger.exception("Failed to insert post %d at page %d", post_id, page)
            raise StorageError("Failed to insert post") from err


def to_post_out(post: Post) -> PostOut:
    """Convert a Post ORM instance to the rendering schema."""
    return PostOut.model_construct(
        id=post.id,
        page=int(post.page),
        content=post.content,
        created=int(post.created),
    )
