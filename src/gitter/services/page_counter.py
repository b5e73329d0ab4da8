"""Monotonic page number generator.

The counter caches ``MAX(page)`` over the posts table. It is seeded once at
startup and then only ever moves forward: a submission that takes a number
and then fails to insert leaves a permanent gap in the sequence. Readers use
the current value as the upper bound of their feed window.
"""

from __future__ import annotations

import logging
import threading

from sqlalchemy.orm import Session

from gitter.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)


class PageCounter:
    """Process-wide page counter shared by the feed and ingestion services."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def initialize(self, session: Session) -> int:
        """Seed the counter from the highest stored page number.

        Args:
            session: Session used for the one-off ``MAX(page)`` query.

        Returns:
            The seeded value; 0 when no posts exist.
        """
        max_page = PostRepository(session).max_page()
        if max_page is None:
            logger.info("Did not find max page.")
            max_page = 0
        else:
            logger.info("Found max page: %d", max_page)
        with self._lock:
            self._value = max_page
        return max_page

    def next(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def current(self) -> int:
        """Return the latest value handed out."""
        with self._lock:
            return self._value
