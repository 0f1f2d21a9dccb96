# test/conftest.py
import copy
import json
from types import SimpleNamespace

import pytest
from pymongo.errors import OperationFailure

from Seeder.registry import SAMPLE_COLLECTIONS


class FakeCollection:
    def __init__(self, db, name):
        self.db = db
        self.name = name
        self.fail_on = set()  # operation names that raise OperationFailure

    @property
    def docs(self):
        return self.db.store.setdefault(self.name, [])

    def _check(self, op):
        if op in self.fail_on:
            raise OperationFailure(f"{op} failed on {self.name}")

    def insert_many(self, docs, session=None):
        self._check("insert_many")
        if not docs:
            raise TypeError("documents must be a non-empty list")
        self.docs.extend(copy.deepcopy(docs))
        return SimpleNamespace(inserted_ids=[d.get("_id", i) for i, d in enumerate(docs)])

    def delete_many(self, filter, session=None):
        self._check("delete_many")
        self.db.client.calls.append(("delete_many", self.name, session))
        deleted = len(self.docs)
        self.docs.clear()
        return SimpleNamespace(deleted_count=deleted)

    def count_documents(self, filter):
        self._check("count_documents")
        return len(self.docs)


class FakeDatabase:
    def __init__(self, client, name):
        self.client = client
        self.name = name
        self.store = {}
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(self, name)
        return self.collections[name]


class FakeSession:
    """Transactions snapshot every database and restore it when the callback raises."""

    def __init__(self, client):
        self.client = client
        self.ended = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.ended = True
        return False

    def with_transaction(self, callback):
        snapshot = {name: copy.deepcopy(db.store) for name, db in self.client.databases.items()}
        try:
            return callback(self)
        except Exception:
            for name, store in snapshot.items():
                self.client.databases[name].store = store
            raise


class FakeClient:
    def __init__(self):
        self.databases = {}
        self.sessions = []
        self.calls = []
        self.closed = False

    def __getitem__(self, name):
        if name not in self.databases:
            self.databases[name] = FakeDatabase(self, name)
        return self.databases[name]

    def start_session(self):
        session = FakeSession(self)
        self.sessions.append(session)
        return session

    def close(self):
        self.closed = True


# record counts written by the data_dir fixture
FIXTURE_COUNTS = {
    "users": 3,
    "organizations": 2,
    "posts": 4,
    "events": 2,
    "venue": 1,
    "recurrenceRules": 1,
    "appUserProfiles": 3,
    "actionItemCategories": 2,
    "agendaCategories": 5,
}


def write_fixture(directory, name, docs):
    path = directory / f"{name}.json"
    path.write_text(json.dumps(docs), encoding="utf-8")
    return path


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def db(client):
    return client["talawa-api"]


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "sample_data"
    directory.mkdir()
    for name, count in FIXTURE_COUNTS.items():
        write_fixture(directory, name, [{"name": f"{name}-{i}", "index": i} for i in range(count)])
    return directory


def count_in(db, name):
    return len(db.store.get(SAMPLE_COLLECTIONS[name].collection, []))
