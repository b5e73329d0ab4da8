# src/gitter/models/post.py
"""SQLAlchemy model for forum posts."""

from sqlalchemy import BigInteger, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gitter.db.session import Base

# Unix seconds computed by SQLite at insert time.
CREATED_DEFAULT = text("(CAST(strftime('%s', 'now') AS INTEGER))")


class Post(Base):
    """A short text message shown on the feed.

    ``page`` is the logical sequence number handed out by the page counter.
    It is assigned once at insert and never changes; the feed paginates on it
    so that posts arriving mid-read do not shift the reader's window.
    """

    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_created_page", "created", "page"),)
    # Fetch the storage-assigned ``created`` as part of the INSERT.
    __mapper_args__ = {"eager_defaults": True}

    # Random 63-bit identifier chosen by the ingestion service.
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    page: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        server_default=CREATED_DEFAULT,
    )
