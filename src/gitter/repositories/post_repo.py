"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from gitter.models.post import Post

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def max_page(self) -> int | None:
        """Return the highest page number stored, or None for an empty table."""
        return self.session.execute(select(func.max(Post.page))).scalar_one_or_none()

    def list_up_to_page(self, upper_bound: int, limit: int) -> list[Post]:
        """Return posts with ``page <= upper_bound``, newest first.

        Ties on ``created`` fall back to ``page`` so that posts written within
        the same second keep their insertion order.
        """
        result = self.session.execute(
            select(Post)
            .where(Post.page <= upper_bound)
            .order_by(Post.created.desc(), Post.page.desc())
            .limit(limit)
        )
        return list(result.scalars())

    def create(self, *, post_id: int, page: int, content: str) -> Post:
        """Insert a new post and commit it.

        Args:
            post_id: Random identifier chosen by the caller.
            page: Page number issued by the page counter.
            content: Message text exactly as submitted.
        """
        post = Post(id=post_id, page=page, content=content)
        self.session.add(post)
        self.session.commit()
        return post
