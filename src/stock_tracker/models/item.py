"""
Item data models.

Models representing a single stock record and the ways its quantity
can change.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

# Items below this quantity count as low stock.
LOW_STOCK_THRESHOLD = 5


class StockChange(str, Enum):
    """Direction of a single-unit quantity adjustment."""
    
    INCREASE = "increase"
    DECREASE = "decrease"


class StockLevel(str, Enum):
    """Display classification of an item's quantity."""
    
    OUT_OF_STOCK = "out_of_stock"   # Quantity is zero
    LOW_STOCK = "low_stock"         # Below LOW_STOCK_THRESHOLD
    OK = "ok"


class Item(BaseModel):
    """A stock record."""
    
    id: int = Field(description="Unique identifier, issued at creation time")
    name: str = Field(description="Trimmed, non-empty item name")
    stock_quantity: int = Field(
        alias="stockQuantity",
        ge=0,
        description="Units in stock, never negative",
    )
    price: float = Field(
        default=0,
        description="Unit price (stored only)",
    )
    
    class Config:
        populate_by_name = True
        validate_assignment = True
        extra = "forbid"
    
    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value
    
    @property
    def in_stock(self) -> bool:
        """Whether at least one unit is in stock."""
        return self.stock_quantity > 0
    
    @property
    def is_low_stock(self) -> bool:
        """Whether the quantity is below the low stock threshold."""
        return self.stock_quantity < LOW_STOCK_THRESHOLD
    
    @property
    def stock_level(self) -> StockLevel:
        """Classify the quantity for display."""
        if self.stock_quantity == 0:
            return StockLevel.OUT_OF_STOCK
        if self.is_low_stock:
            return StockLevel.LOW_STOCK
        return StockLevel.OK
    
    def to_record(self) -> dict:
        """Serialize to the stored record layout."""
        return self.model_dump(by_alias=True)
