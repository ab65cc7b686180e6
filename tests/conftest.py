"""
Shared pytest fixtures.

`FakeConnection` stands in for the pooled asyncpg connection: it records
every statement and hands back scripted results in call order, so service
and route tests run without PostgreSQL.
"""

from collections import deque
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from core import db
from main import create_app


class FakeConnection:
    def __init__(self):
        self.calls = []
        self._results = deque()

    def queue(self, *results):
        """Script results for the next calls; an exception instance is raised."""
        self._results.extend(results)
        return self

    def _next(self, default):
        if not self._results:
            return default
        result = self._results.popleft()
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch(self, sql, *args):
        self.calls.append(("fetch", sql, args))
        return self._next([])

    async def fetchrow(self, sql, *args):
        self.calls.append(("fetchrow", sql, args))
        return self._next(None)

    @property
    def statements(self):
        return [sql for _, sql, _ in self.calls]

    @property
    def args(self):
        return [args for _, _, args in self.calls]


@pytest.fixture()
def conn():
    return FakeConnection()


@pytest.fixture()
def app(conn):
    application = create_app()

    async def _fake_connection():
        yield conn

    application.dependency_overrides[db.get_connection] = _fake_connection
    return application


@pytest.fixture()
def client(app):
    # No context manager: the lifespan (and its real pool) never starts.
    return TestClient(app)


@pytest.fixture()
def review_row():
    return {
        "review_id": 3,
        "title": "Ultimate Werewolf",
        "review_body": "We couldn't find the werewolf!",
        "designer": "Akihisa Okui",
        "review_img_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
        "votes": 5,
        "category": "social deduction",
        "owner": "bainesface",
        "created_at": datetime(2021, 1, 18, 10, 1, 41, 251000),
        "comment_count": "3",
    }


@pytest.fixture()
def comment_row():
    return {
        "comment_id": 3,
        "author": "philippaclaire9",
        "review_id": 3,
        "votes": 10,
        "created_at": datetime(2021, 1, 18, 10, 9, 48, 110000),
        "body": "I didn't know dogs could play games",
    }
