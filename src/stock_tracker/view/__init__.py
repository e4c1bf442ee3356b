"""
View package for Stock Tracker.

This package contains:
- Pure derivation of the filtered, sorted view model
- The interactive session that owns transient view state
"""

from stock_tracker.view.derive import (
    collation_key,
    derive_view_model,
    filter_items,
    sort_items,
)
from stock_tracker.view.session import InventorySession

__all__ = [
    "InventorySession",
    "collation_key",
    "derive_view_model",
    "filter_items",
    "sort_items",
]
