"""Pytest fixtures for memberzone tests."""

from copy import deepcopy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from starlette.testclient import TestClient

from memberzone.app import create_app
from memberzone.context import AppContext
from memberzone.startup import bootstrap_admins

TEST_SECRET = "test-session-secret"


# ---------------------------------------------------------------------------
# In-memory stand-in for the parts of the pymongo API the repositories use
# ---------------------------------------------------------------------------


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in (query or {}).items())


class FakeCollection:
    """Minimal pymongo Collection: equality filters, $set updates, unique indexes."""

    def __init__(self):
        self.docs: list[dict] = []
        self.indexes: list[tuple] = []
        self._unique_fields: list[str] = []

    def create_index(self, keys, unique=False, **kwargs):
        if isinstance(keys, str):
            fields = [keys]
        else:
            fields = [k for k, _ in keys]
        self.indexes.append((fields, unique, kwargs))
        if unique:
            self._unique_fields.extend(fields)
        return "_".join(fields)

    def insert_one(self, doc: dict):
        doc = deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        for existing in self.docs:
            if existing["_id"] == doc["_id"]:
                raise DuplicateKeyError("E11000 duplicate key error: _id")
            for field in self._unique_fields:
                if field in doc and existing.get(field) == doc[field]:
                    raise DuplicateKeyError(f"E11000 duplicate key error: {field}")
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query=None):
        return [deepcopy(d) for d in self.docs if _matches(d, query)]

    def find_one(self, query=None):
        for doc in self.docs:
            if _matches(doc, query):
                return deepcopy(doc)
        return None

    def update_one(self, query, update):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(deepcopy(update.get("$set", {})))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def count_documents(self, query):
        return sum(1 for d in self.docs if _matches(d, query))


class FakeDatabase:
    """Dict-like database handing out FakeCollections by name."""

    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def ctx(db):
    """AppContext backed by the in-memory database, indexes created."""
    context = AppContext.from_db(db)
    context.user_repo.ensure_indexes()
    context.session_repo.ensure_indexes()
    return context


@pytest.fixture
def app(ctx):
    return create_app(ctx, TEST_SECRET)


@pytest.fixture
def client(app):
    """Browser-like client; keeps its own cookies."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_client(app):
    """Factory for additional independent clients (one per simulated browser)."""

    def _make():
        return TestClient(app, raise_server_exceptions=False)

    return _make


def signup(client, name="Ann", email="ann@x.com", password="secret"):
    return client.post(
        "/signup",
        data={"name": name, "email": email, "password": password},
        follow_redirects=False,
    )


def login(client, email="ann@x.com", password="secret"):
    return client.post(
        "/login",
        data={"email": email, "password": password},
        follow_redirects=False,
    )


@pytest.fixture
def admin_client(ctx, make_client):
    """Client signed in as an admin (promoted via the startup bootstrap)."""
    admin = make_client()
    signup(admin, name="Root", email="root@mail.com", password="rootpass")
    bootstrap_admins(ctx, ["root@mail.com"])
    # Re-authenticate so the session snapshot carries the admin role
    login(admin, email="root@mail.com", password="rootpass")
    return admin
