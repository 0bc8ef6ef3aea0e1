"""Shared fixtures for catalog tests.

The store runs against an in-memory MongoDB double from mongomock-motor.
Text search is not implemented by mongomock, so search tests use the
``mock_database`` fixtures instead.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from mongomock_motor import AsyncMongoMockClient

from mongomart.catalog.store import CatalogStore


def make_item(item_id: Any, category: str | None = "Apparel", **fields: Any) -> dict[str, Any]:
    """Build an item document."""
    document = {
        "_id": item_id,
        "title": f"Item {item_id}",
        "description": f"Description of item {item_id}",
        "slogan": "Made of 100% cotton",
        "category": category,
        "price": 9.99,
        "img_url": f"/img/products/{item_id}.jpg",
        "stars": 0,
        "reviews": [],
    }
    document.update(fields)
    return document


# ============================================================================
# In-memory MongoDB
# ============================================================================


@pytest.fixture
def database():
    """Create an empty in-memory database."""
    return AsyncMongoMockClient()["mongomart_test"]


@pytest.fixture
def collection(database):
    """The item collection."""
    return database["item"]


@pytest.fixture
def store(database) -> CatalogStore:
    """Create a store over the in-memory database."""
    return CatalogStore(database)


# ============================================================================
# Mocked driver
# ============================================================================


@pytest.fixture
def mock_cursor() -> MagicMock:
    """Cursor mock with an awaitable to_list()."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def mock_collection(mock_cursor: MagicMock) -> MagicMock:
    """Collection mock returning ``mock_cursor`` from find()."""
    collection = MagicMock()
    collection.find.return_value = mock_cursor
    collection.aggregate.return_value = mock_cursor
    collection.count_documents = AsyncMock(return_value=0)
    collection.find_one = AsyncMock(return_value=None)
    collection.update_one = AsyncMock()
    return collection


@pytest.fixture
def mock_database(mock_collection: MagicMock) -> MagicMock:
    """Database mock handing out ``mock_collection``."""
    database = MagicMock()
    database.__getitem__.return_value = mock_collection
    return database


@pytest.fixture
def mock_store(mock_database: MagicMock) -> CatalogStore:
    """Create a store over the mocked driver."""
    return CatalogStore(mock_database)


@pytest.fixture
def item_doc():
    """Factory for item documents: ``item_doc(id, category, **fields)``."""
    return make_item
