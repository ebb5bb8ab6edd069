"""Shared test fixtures."""

from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from bson.codec_options import CodecOptions
from httpx import ASGITransport, AsyncClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from portfolio_api.repositories.project_repo import ProjectRepository

TZ_AWARE = CodecOptions(tz_aware=True)


def bson_roundtrip(doc):
    """Copy a document the way the server stores it (e.g. dates cut to milliseconds)."""
    return bson.decode(bson.encode(doc), codec_options=TZ_AWARE)


class InMemoryCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key_or_list, direction=None):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction)]
        docs = list(self._docs)
        # Stable sorts from the least significant key up; no implicit tiebreak
        for field, field_direction in reversed(keys):
            docs.sort(key=lambda d: d.get(field), reverse=field_direction < 0)
        self._docs = docs
        return self

    async def to_list(self, length=None):
        docs = self._docs if length is None else self._docs[:length]
        return [bson_roundtrip(d) for d in docs]


class InMemoryCollection:
    """Async stand-in for a pymongo collection, supporting the calls the repository makes.

    ``calls`` records every operation so tests can assert the store was not
    touched; setting ``fail_with`` makes every operation raise that error.
    """

    def __init__(self):
        self.docs: dict[ObjectId, dict] = {}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self.database = SimpleNamespace(command=self._command)

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    async def _command(self, name):
        self._record(name)
        return {"ok": 1.0}

    async def insert_one(self, doc):
        self._record("insert_one")
        doc.setdefault("_id", ObjectId())
        self.docs[doc["_id"]] = bson_roundtrip(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, filter=None):
        self._record("find")
        return InMemoryCursor(list(self.docs.values()))

    async def find_one(self, filter):
        self._record("find_one")
        doc = self.docs.get(filter["_id"])
        return bson_roundtrip(doc) if doc else None

    async def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        self._record("find_one_and_update")
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return None
        before = bson_roundtrip(doc)
        after = {**doc, **update.get("$set", {})}
        for name in update.get("$unset", {}):
            after.pop(name, None)
        self.docs[filter["_id"]] = after = bson_roundtrip(after)
        return bson_roundtrip(after) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, filter):
        self._record("find_one_and_delete")
        return self.docs.pop(filter["_id"], None)


@pytest.fixture
def collection():
    return InMemoryCollection()


@pytest.fixture
def project_repo(collection):
    return ProjectRepository(collection)


@pytest.fixture
def failing_collection(collection):
    collection.fail_with = PyMongoError("connection reset by peer")
    return collection


@pytest.fixture
def app(project_repo):
    """Create a test application instance backed by the in-memory collection."""
    from portfolio_api.main import create_app

    _app = create_app()
    _app.state.project_repo = project_repo
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
