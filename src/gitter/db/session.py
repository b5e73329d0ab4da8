"""Database engine and session configuration."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from gitter.core.settings import Settings, settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import gitter.models  # noqa: E402,F401


def build_engine(cfg: Settings) -> Engine:
    """Create an engine for ``cfg.database_url`` honouring the busy timeout."""
    connect_args: dict[str, Any] = {}
    if cfg.is_sqlite:
        # pysqlite waits up to ``timeout`` seconds on a locked database.
        connect_args = {
            "timeout": cfg.busy_timeout_seconds,
            "check_same_thread": False,
        }
    return create_engine(
        cfg.database_url,
        pool_pre_ping=True,
        echo=cfg.sql_debug,
        connect_args=connect_args,
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a session from the application's factory for dependency injection.

    The session is closed on every exit path, including errors raised by the
    handler.
    """
    factory: sessionmaker[Session] = getattr(
        request.app.state, "session_factory", SessionLocal
    )
    db = factory()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=bind or engine)
