"""Paginated read of the post feed."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from gitter.core.errors import StorageError
from gitter.models.post import Post
from gitter.repositories.post_repo import PostRepository
from gitter.services.page_counter import PageCounter

DEFAULT_PAGE = 0
PAGE_SIZE = 10

logger = logging.getLogger(__name__)


def parse_page(raw: str | None) -> int:
    """Parse the ``page`` query parameter.

    Absent or non-numeric input maps to ``DEFAULT_PAGE`` instead of being
    rejected. Negative values are clamped to ``DEFAULT_PAGE``.
    """
    if raw is None:
        return DEFAULT_PAGE
    try:
        page = int(raw.strip())
    except ValueError:
        return DEFAULT_PAGE
    return max(page, DEFAULT_PAGE)


class FeedService:
    """Compute the page window and load the posts inside it."""

    def __init__(
        self,
        repo: PostRepository,
        counter: PageCounter,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.repo = repo
        self.counter = counter
        self.page_size = page_size

    def upper_bound(self, requested_page: int) -> int:
        """Return the highest page number visible on ``requested_page``.

        The bound is taken from a single counter snapshot, so posts submitted
        while the request is in flight never shift its window.
        """
        return self.counter.current() - requested_page * self.page_size

    def list(self, requested_page: int = DEFAULT_PAGE) -> list[Post]:
        """Return up to ``page_size`` posts for ``requested_page``, newest first.

        Raises:
            StorageError: If the query fails.
        """
        bound = self.upper_bound(requested_page)
        if bound < 0:
            return []
        try:
            return self.repo.list_up_to_page(bound, self.page_size)
        except SQLAlchemyError as err:
            logger.exception("Failed to list posts")
            raise StorageError("Failed to list posts") from err
