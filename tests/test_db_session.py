# tests/test_db_session.py
"""Tests for engine construction and storage-assigned columns."""

import time

import pytest
from sqlalchemy import create_engine, insert, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from gitter.core.settings import Settings
from gitter.db import session as db_session_module
from gitter.db.session import build_engine, create_tables
from gitter.models import Post


def test_build_engine_passes_busy_timeout(monkeypatch, tmp_path) -> None:
    """The SQLite driver receives the configured busy timeout."""
    captured = {}

    def _capture(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return create_engine(url, **kwargs)

    monkeypatch.setattr(db_session_module, "create_engine", _capture)
    cfg = Settings(database_url=f"sqlite:///{tmp_path / 'gitter.db'}", busy_timeout_seconds=5)
    engine = build_engine(cfg)
    try:
        assert captured["connect_args"] == {"timeout": 5.0, "check_same_thread": False}
        assert captured["pool_pre_ping"] is True
    finally:
        engine.dispose()


def test_contended_write_waits_for_busy_timeout(tmp_path) -> None:
    """A writer blocked by another connection fails after the busy timeout."""
    cfg = Settings(database_url=f"sqlite:///{tmp_path / 'gitter.db'}", busy_timeout_seconds=0.3)
    holder_engine = build_engine(cfg)
    writer_engine = build_engine(cfg)
    create_tables(bind=holder_engine)

    holder = holder_engine.raw_connection()
    try:
        holder.cursor().execute("BEGIN IMMEDIATE")

        started = time.monotonic()
        with pytest.raises(OperationalError, match="locked"):
            with writer_engine.begin() as conn:
                conn.execute(insert(Post).values(id=1, page=1, content="blocked"))
        waited = time.monotonic() - started

        assert 0.2 <= waited < 3.0
    finally:
        holder.rollback()
        holder.close()
        holder_engine.dispose()
        writer_engine.dispose()


def test_created_is_assigned_by_storage(db_session) -> None:
    before = int(time.time())
    post = Post(id=5, page=1, content="hello")
    db_session.add(post)
    db_session.commit()
    after = int(time.time())

    assert before - 1 <= post.created <= after + 1
    raw = db_session.execute(text("SELECT created FROM posts WHERE id = 5")).scalar_one()
    assert raw == post.created
