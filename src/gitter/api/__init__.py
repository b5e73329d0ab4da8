"""HTTP surface of the Gitter forum."""

from .endpoints import auth_router, feed_router, pages_router, posts_router

__all__ = [
    "auth_router",
    "feed_router",
    "pages_router",
    "posts_router",
]
