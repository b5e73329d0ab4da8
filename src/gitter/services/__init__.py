"""Business logic services for the Gitter forum."""

from .auth import AuthService
from .feed import FeedService, parse_page
from .page_counter import PageCounter
from .post_service import PostIngestionService

__all__ = [
    "AuthService",
    "FeedService",
    "PageCounter",
    "PostIngestionService",
    "parse_page",
]
