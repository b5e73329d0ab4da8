# tests/test_post_service.py
"""Tests for post ingestion and the page-number gap policy."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy.exc import OperationalError

from gitter.core.errors import MissingFieldError, StorageError
from gitter.models import Post
from gitter.repositories.post_repo import PostRepository
from gitter.services.page_counter import PageCounter
from gitter.services.post_service import PostIngestionService, generate_id, to_post_out


class _Session:
    def __init__(self) -> None:
        self.rollbacks = 0

    def rollback(self) -> None:
        self.rollbacks += 1


class MemoryPostRepository:
    """Stand-in repository recording inserts in memory."""

    def __init__(self) -> None:
        self.session = _Session()
        self.rows: list[Post] = []
        self._lock = threading.Lock()

    def create(self, *, post_id: int, page: int, content: str) -> Post:
        post = Post(id=post_id, page=page, content=content, created=0)
        with self._lock:
            self.rows.append(post)
        return post


class FailingPostRepository(MemoryPostRepository):
    def create(self, *, post_id: int, page: int, content: str) -> Post:
        raise OperationalError("INSERT INTO posts", {}, Exception("database is locked"))


def test_generate_id_is_non_negative_63_bit() -> None:
    for _ in range(100):
        value = generate_id()
        assert 0 <= value < 2**63


def test_submit_persists_post_with_next_page(db_session) -> None:
    counter = PageCounter()
    service = PostIngestionService(PostRepository(db_session), counter)

    hello = service.submit("hello")
    world = service.submit("world")

    assert (hello.page, world.page) == (1, 2)
    assert counter.current() == 2
    stored = db_session.get(Post, hello.id)
    assert stored is not None
    assert stored.content == "hello"
    assert stored.created > 0


@pytest.mark.parametrize("content", [None, ""])
def test_submit_rejects_missing_message(content) -> None:
    """Nothing is written and no page number is consumed."""
    counter = PageCounter(start=5)
    repo = MemoryPostRepository()
    service = PostIngestionService(repo, counter)

    with pytest.raises(MissingFieldError):
        service.submit(content)

    assert counter.current() == 5
    assert repo.rows == []


def test_failed_insert_leaves_permanent_gap() -> None:
    counter = PageCounter(start=7)
    service = PostIngestionService(FailingPostRepository(), counter)

    with pytest.raises(StorageError):
        service.submit("lost")

    assert counter.current() == 8
    assert service.repo.session.rollbacks == 1

    recovered = PostIngestionService(MemoryPostRepository(), counter).submit("kept")
    assert recovered.page == 9


def test_concurrent_submissions_get_distinct_contiguous_pages() -> None:
    counter = PageCounter(start=3)
    repo = MemoryPostRepository()
    service = PostIngestionService(repo, counter)
    total = 200

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: service.submit(f"post {i}"), range(total)))

    pages = sorted(post.page for post in repo.rows)
    assert pages == list(range(4, 4 + total))


def test_to_post_out() -> None:
    post = Post(id=11, page=2, content="hi", created=1_700_000_000)
    out = to_post_out(post)
    assert out.id == 11
    assert out.page == 2
    assert out.content == "hi"
    assert out.created == 1_700_000_000


def test_failed_insert_is_logged_with_traceback(caplog) -> None:
    service = PostIngestionService(FailingPostRepository(), PageCounter())

    with caplog.at_level("ERROR", logger="gitter.services.post_service"):
        with pytest.raises(StorageError):
            service.submit("lost")

    record = caplog.records[-1]
    assert record.getMessage().endswith("at page 1")
    assert record.exc_info is not None
    assert record.exc_info[0] is OperationalError
