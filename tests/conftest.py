from __future__ import annotations

from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gitter.core.settings import Settings
from gitter.db.session import Base
from gitter.main import create_app
from gitter.models import Post
from gitter.services.page_counter import PageCounter

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def test_settings() -> Settings:
    """Settings with cheap Argon2 parameters so hashing stays fast."""
    return Settings(
        database_url=TEST_DB_URL,
        argon2_time_cost=1,
        argon2_memory_cost_kib=256,
        argon2_parallelism=1,
        argon2_hash_length=32,
        auto_create_tables=False,
    )


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(test_settings: Settings, session_factory: sessionmaker[Session]) -> FastAPI:
    return create_app(settings=test_settings, session_factory=session_factory)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test", follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture()
def page_counter(app: FastAPI, client: TestClient) -> PageCounter:
    """The counter owned by the running application (seeded at startup)."""
    return app.state.page_counter


@pytest.fixture()
def insert_post(db_session: Session) -> Callable[..., Post]:
    """Return a helper inserting posts directly, bypassing the counter."""

    def _insert(*, post_id: int, page: int, content: str, created: int = 1_700_000_000) -> Post:
        post = Post(id=post_id, page=page, content=content, created=created)
        db_session.add(post)
        db_session.commit()
        return post

    return _insert
