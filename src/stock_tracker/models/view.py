"""
View model data models.

Models representing the derived, display-ready state: the selected
filter and sort order, and the resulting list with its summary counts.
"""

from enum import Enum

from pydantic import BaseModel, Field

from stock_tracker.models.item import Item


class StockFilter(str, Enum):
    """Which items to show."""
    
    ALL = "all"
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"


class SortOrder(str, Enum):
    """How to order the shown items."""
    
    DEFAULT = "default"             # Insertion order
    NAME_ASC = "name_asc"
    QUANTITY_DESC = "quantity_desc"


class ViewModel(BaseModel):
    """The filtered, sorted list and summary counts shown to the user."""
    
    items: list[Item] = Field(
        default_factory=list,
        description="Copies of the items to display, filtered and sorted",
    )
    filter: StockFilter = Field(
        default=StockFilter.ALL,
        description="Filter that produced the list",
    )
    sort_order: SortOrder = Field(
        default=SortOrder.DEFAULT,
        description="Sort order applied to the list",
    )
    total_count: int = Field(
        default=0,
        description="Number of items in the whole collection",
    )
    in_stock_count: int = Field(
        default=0,
        description="Number of items with quantity above zero",
    )
    all_in_stock: bool = Field(
        default=True,
        description="Whether every item has quantity above zero",
    )
    
    @property
    def can_clear_zero_stock(self) -> bool:
        """Whether clearing zero-stock items would remove anything."""
        return not self.all_in_stock
    
    @property
    def shown_count(self) -> int:
        """Number of items in the display list."""
        return len(self.items)
    
    @property
    def is_empty(self) -> bool:
        """Check if nothing is shown."""
        return len(self.items) == 0
