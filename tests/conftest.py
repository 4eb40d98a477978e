"""
Pytest configuration and shared fixtures for exercise tracker tests.
"""

import copy
import os
import sys
from types import SimpleNamespace
from typing import Any

import bson
import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

# Add project root to Python path for imports
root_path = os.path.join(os.path.dirname(__file__), "..")
if root_path not in sys.path:
    sys.path.insert(0, root_path)

from models.database import ExerciseStore  # noqa: E402


class FakeCursor:
    """Mock motor cursor."""

    def __init__(self, documents: list[dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """In-memory stand-in for a motor collection.

    Supports the subset of queries the store issues: lookups by ``_id`` and
    ``$push``/``$inc`` updates. Writes are BSON encoded first, as the
    driver does, so values BSON cannot hold fail here too.
    """

    def __init__(self):
        self.documents: list[dict[str, Any]] = []
        self.indexes: list[Any] = []

    def _match(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return document
        return None

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append(keys)
        return "_".join(f"{name}_{direction}" for name, direction in keys)

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        bson.encode(document)
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find(self, query: dict[str, Any]) -> FakeCursor:
        matches = [d for d in self.documents if all(d.get(k) == v for k, v in query.items())]
        return FakeCursor(copy.deepcopy(matches))

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        document = self._match(query)
        return copy.deepcopy(document) if document is not None else None

    async def find_one_and_update(
        self, query: dict[str, Any], update: dict[str, Any], **kwargs: Any
    ) -> dict[str, Any] | None:
        bson.encode(update)
        document = self._match(query)
        if document is None:
            return None
        for field, spec in update.get("$push", {}).items():
            position = spec.get("$position", len(document[field]))
            for offset, item in enumerate(spec["$each"]):
                document[field].insert(position + offset, copy.deepcopy(item))
        for field, amount in update.get("$inc", {}).items():
            document[field] = document.get(field, 0) + amount
        return copy.deepcopy(document)


class FailingCollection(FakeCollection):
    """Collection whose every operation fails at the driver level."""

    def find(self, query: dict[str, Any]) -> FakeCursor:
        raise PyMongoError("connection refused")

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        raise PyMongoError("connection refused")

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        raise PyMongoError("connection refused")

    async def find_one_and_update(self, query, update, **kwargs):
        raise PyMongoError("connection refused")

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        raise PyMongoError("connection refused")


@pytest.fixture
def collection() -> FakeCollection:
    """Provide an empty in-memory users collection."""
    return FakeCollection()


@pytest.fixture
def store(collection: FakeCollection) -> ExerciseStore:
    """Provide a store backed by the in-memory collection."""
    return ExerciseStore(collection)


@pytest.fixture
def failing_store() -> ExerciseStore:
    """Provide a store whose collection always fails."""
    return ExerciseStore(FailingCollection())
