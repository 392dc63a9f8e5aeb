"""Test fixtures and configuration."""
import pytest
from datetime import datetime, timedelta
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import app
from app.core.security import SessionResolver, get_session_resolver
from app.services.user_service import UserRepository, get_user_repository

TEST_SECRET = "test-secret-for-session-tokens-0001"


class FakeCursor:
    """Mimics the slice of Motor's cursor API the repository uses."""

    def __init__(self, documents):
        self._documents = list(documents)

    def sort(self, key, direction):
        self._documents.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return list(self._documents if length is None else self._documents[:length])


class FakeUsersCollection:
    """In-memory users collection that records every query issued."""

    def __init__(self, documents=()):
        self.documents = [dict(doc) for doc in documents]
        self.queries = []

    async def find_one(self, query):
        self.queries.append(("find_one", query))
        for doc in self.documents:
            if all(doc.get(key) == value for key, value in query.items()):
                return dict(doc)
        return None

    def find(self, query=None):
        self.queries.append(("find", query or {}))
        return FakeCursor(dict(doc) for doc in self.documents)


def make_user(telegram_id, created_at, is_admin=False, **extra):
    doc = {
        "_id": ObjectId(),
        "telegramId": telegram_id,
        "isAdmin": is_admin,
        "createdAt": created_at,
        "username": f"user{telegram_id}",
    }
    doc.update(extra)
    return doc


@pytest.fixture
def base_time():
    return datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def users_collection(base_time):
    """Admin 1001 (oldest), regular 1002, regular 1003 (newest)."""
    return FakeUsersCollection([
        make_user(1002, base_time + timedelta(days=1)),
        make_user(1001, base_time, is_admin=True),
        make_user(1003, base_time + timedelta(days=2)),
    ])


@pytest.fixture
def resolver():
    return SessionResolver(secret_key=TEST_SECRET)


@pytest.fixture
def client(resolver, users_collection):
    app.dependency_overrides[get_session_resolver] = lambda: resolver
    app.dependency_overrides[get_user_repository] = lambda: UserRepository(lambda: users_collection)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def session_cookie(resolver):
    """Builds a session cookie for the given Telegram id."""
    def _cookie(telegram_id, **claims):
        token = resolver.create_token({"id": telegram_id, "first_name": "Test", **claims})
        return {"session_token": token}
    return _cookie
