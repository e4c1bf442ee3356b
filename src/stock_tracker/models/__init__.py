"""
Data models for Stock Tracker.

This package contains Pydantic models for representing stock items
and the derived view model.
"""

from stock_tracker.models.item import (
    LOW_STOCK_THRESHOLD,
    Item,
    StockChange,
    StockLevel,
)
from stock_tracker.models.view import (
    SortOrder,
    StockFilter,
    ViewModel,
)

__all__ = [
    # Item models
    "LOW_STOCK_THRESHOLD",
    "Item",
    "StockChange",
    "StockLevel",
    # View models
    "SortOrder",
    "StockFilter",
    "ViewModel",
]
