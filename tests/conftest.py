# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - fake_collection      → In-memory stand-in for a pymongo Collection
# - sample_resources     → The four sample resources as a list
# - patched_driver       → pymongo.MongoClient replaced by a MagicMock
#                          whose db[collection] is `fake_collection`
# - app_config           → AppConfig with defaults (no .env involved)
#
# ==============================================

import copy
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from infra_cost.config import AppConfig, MongoConfig, reset_config
from infra_cost.storage.sample_data import SAMPLE_RESOURCES


class FakeInsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """Just enough of the pymongo Collection API for the optimizer."""

    def __init__(self, name="infrastructure"):
        self.name = name
        self.documents = []
        self.unique_fields = set()
        self.drop_count = 0

    def insert_one(self, document):
        for key in self.unique_fields:
            if any(doc.get(key) == document.get(key) for doc in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error: {key}", code=11000)
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return FakeInsertResult(stored["_id"])

    def find(self, query=None):
        assert not query, "FakeCollection only supports unfiltered find()"
        return iter(copy.deepcopy(self.documents))

    def create_index(self, key, unique=False):
        if unique:
            self.unique_fields.add(key)
        return f"{key}_1"

    def drop(self):
        self.documents = []
        self.unique_fields = set()
        self.drop_count += 1


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def sample_resources():
    return list(SAMPLE_RESOURCES)


@pytest.fixture
def app_config():
    return AppConfig(mongo=MongoConfig())


@pytest.fixture
def patched_driver(fake_collection):
    """Replace the pymongo driver class used by infra_cost.storage.mongo_client."""
    with patch("infra_cost.storage.mongo_client.PyMongoClient") as driver_cls:
        driver = driver_cls.return_value
        database = MagicMock()
        database.__getitem__.return_value = fake_collection
        driver.__getitem__.return_value = database
        yield driver_cls


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()
