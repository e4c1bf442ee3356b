"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from stock_tracker.store.inventory_store import InventoryStore
from stock_tracker.store.storage import JsonFileStorage, MemoryStorage


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """An empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage: MemoryStorage) -> InventoryStore:
    """An empty store backed by in-memory storage."""
    return InventoryStore(memory_storage)


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Path of a storage file that does not exist yet."""
    return tmp_path / "data" / "storage.json"


@pytest.fixture
def file_storage(storage_file: Path) -> JsonFileStorage:
    """Storage backed by a JSON file in a temporary directory."""
    return JsonFileStorage(storage_file)


@pytest.fixture
def stocked_store(store: InventoryStore) -> InventoryStore:
    """A store with a mix of stock levels, in insertion order."""
    store.add("Bolt", "10")
    store.add("nut", "2")
    store.add("Washer", "0")
    store.add("Anchor", "5")
    return store
