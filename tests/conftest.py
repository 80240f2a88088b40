import copy
import itertools
import json
from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from app.clients.nango_client import NangoClient
from app.db.unified_store import UnifiedObjectStore
from app.main import app


class FakeCollection:
    """Just enough of a pymongo collection for the store: flat equality filters."""

    _ids = itertools.count(1)

    def __init__(self):
        self.docs = []

    def _matches(self, doc, flt):
        return all(doc.get(k) == v for k, v in flt.items())

    def _project(self, doc, projection):
        doc = copy.deepcopy(doc)
        if projection and projection.get("_id") == 0:
            doc.pop("_id", None)
        return doc

    def create_index(self, *args, **kwargs):
        return "index"

    def find_one(self, flt, projection=None):
        for doc in self.docs:
            if self._matches(doc, flt):
                return self._project(doc, projection)
        return None

    def insert_one(self, doc):
        doc["_id"] = next(self._ids)
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def update_one(self, flt, update):
        for doc in self.docs:
            if self._matches(doc, flt):
                doc.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(modified_count=1)
        return SimpleNamespace(modified_count=0)

    def update_many(self, flt, update):
        count = 0
        for doc in self.docs:
            if self._matches(doc, flt):
                doc.update(copy.deepcopy(update["$set"]))
                count += 1
        return SimpleNamespace(modified_count=count)

    def find_one_and_update(self, flt, update, upsert=False, projection=None, return_document=None):
        for doc in self.docs:
            if self._matches(doc, flt):
                doc.update(copy.deepcopy(update["$set"]))
                return self._project(doc, projection)
        if not upsert:
            return None
        doc = {**flt, **update.get("$setOnInsert", {}), **update["$set"]}
        self.insert_one(doc)
        return self._project(doc, projection)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class RecordingSink:
    def __init__(self):
        self.lines = []

    def info(self, msg, *args, **kwargs):
        self.lines.append(("info", msg))

    def error(self, msg, *args, **kwargs):
        self.lines.append(("error", msg))


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def store(fake_db):
    return UnifiedObjectStore(fake_db)


@pytest.fixture
def make_nango():
    """Build a NangoClient answering from in-memory connections and records.

    ``records`` maps (provider, connection_id) to a list of records, or to an
    int status code to fail that listing with.
    """
    clients = []

    def _make(connections=None, records=None, connections_status=200):
        records = records or {}
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if request.url.path == "/connection":
                if connections_status != 200:
                    return httpx.Response(connections_status, json={"error": "boom"})
                return httpx.Response(200, json={"connections": connections or []})
            if request.url.path == "/records":
                key = (request.headers["Provider-Config-Key"], request.headers["Connection-Id"])
                value = records.get(key, [])
                if isinstance(value, int):
                    return httpx.Response(value, json={"error": "boom"})
                return httpx.Response(200, content=json.dumps({"records": value, "next_cursor": None}))
            return httpx.Response(404)

        client = NangoClient("test-secret", host="https://nango.test", transport=httpx.MockTransport(handler))
        client.calls = calls
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
