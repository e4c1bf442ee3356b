"""
Store package for Stock Tracker.

This package contains the local key-value storage backends and the
inventory store that owns the item collection.
"""

from stock_tracker.store.inventory_store import InventoryStore, parse_quantity
from stock_tracker.store.storage import (
    BaseStorage,
    JsonFileStorage,
    MemoryStorage,
    StorageError,
)

__all__ = [
    "BaseStorage",
    "InventoryStore",
    "JsonFileStorage",
    "MemoryStorage",
    "StorageError",
    "parse_quantity",
]
