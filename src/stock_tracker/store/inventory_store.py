"""
Inventory store holding the authoritative item collection.

All writes to the collection go through the mutation methods of
InventoryStore. Each successful mutation persists the whole collection
to its storage slot. Invalid requests are rejected without raising.
"""

import json
import logging
import re
import time
from typing import Iterator, Optional, Union

from pydantic import ValidationError

from stock_tracker.models.item import Item, StockChange
from stock_tracker.store.storage import BaseStorage, StorageError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "inventory"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def parse_quantity(value: Union[int, str, None]) -> Optional[int]:
    """
    Parse a quantity from form input.

    Args:
        value: An int, or text holding a decimal integer.

    Returns:
        The quantity, or None if it is not a non-negative integer.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.match(text):
            return None
        quantity = int(text)
    else:
        return None
    return quantity if quantity >= 0 else None


class InventoryStore:
    """
    Owner of the item collection and its persistence.
    
    Items keep their insertion order. Lookups by id are linear scans;
    collections are small.
    """
    
    def __init__(
        self,
        storage: BaseStorage,
        key: str = DEFAULT_STORAGE_KEY,
        autoload: bool = True,
    ) -> None:
        """
        Initialize the store.
        
        Args:
            storage: Key-value storage the collection is persisted to.
            key: Name of the storage slot.
            autoload: Load the stored collection immediately.
        """
        self.storage = storage
        self.key = key
        self._items: list[Item] = []
        self._last_id = 0
        
        if autoload:
            self.load()
    
    # Persistence
    
    def load(self) -> list[Item]:
        """
        Replace the collection with the stored snapshot.
        
        A missing, unparsable or invalid snapshot yields an empty
        collection.
        
        Returns:
            The loaded items.
        """
        self._items = self._read_snapshot()
        self._last_id = max((item.id for item in self._items), default=self._last_id)
        logger.debug("Loaded %d items from slot %r", len(self._items), self.key)
        return self.items
    
    def _read_snapshot(self) -> list[Item]:
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning("Could not read stored inventory: %s", e)
            return []
        
        if raw is None:
            return []
        
        try:
            records = json.loads(raw)
        except ValueError as e:
            logger.warning("Stored inventory is not valid JSON, starting empty: %s", e)
            return []
        
        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning("Stored inventory is not a list, starting empty")
            return []
        
        try:
            items = [Item.model_validate(record) for record in records]
        except ValidationError as e:
            logger.warning("Stored inventory has invalid records, starting empty: %s", e)
            return []
        
        ids = [item.id for item in items]
        if len(set(ids)) != len(ids):
            logger.warning("Stored inventory has duplicate ids, starting empty")
            return []
        
        return items
    
    def persist(self) -> None:
        """
        Write the whole collection to the storage slot.
        
        Best effort: failures are logged and never raised.
        """
        payload = json.dumps([item.to_record() for item in self._items])
        try:
            self.storage.set_item(self.key, payload)
        except (OSError, StorageError) as e:
            logger.warning("Failed to persist inventory: %s", e)
    
    # Mutations
    
    def _next_id(self) -> int:
        candidate = int(time.time() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate
    
    def add(self, name: str, quantity: Union[int, str]) -> Optional[Item]:
        """
        Append a new item.
        
        Args:
            name: Item name; surrounding whitespace is removed.
            quantity: Starting quantity as an int or integer text.
            
        Returns:
            The new item, or None if the name is blank or the quantity is
            not a non-negative integer.
        """
        name = (name or "").strip()
        if not name:
            logger.debug("Rejected add: blank name")
            return None
        
        stock_quantity = parse_quantity(quantity)
        if stock_quantity is None:
            logger.debug("Rejected add of %r: invalid quantity %r", name, quantity)
            return None
        
        item = Item(id=self._next_id(), name=name, stock_quantity=stock_quantity, price=0)
        self._items.append(item)
        self.persist()
        return item
    
    def remove(self, item_id: int) -> bool:
        """
        Delete the item with the given id.
        
        Returns:
            True if an item was removed.
        """
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                self.persist()
                return True
        logger.debug("Rejected remove: unknown id %s", item_id)
        return False
    
    def adjust_quantity(
        self,
        item_id: int,
        direction: Union[StockChange, str],
    ) -> Optional[Item]:
        """
        Change an item's quantity by one unit.
        
        Increasing is unbounded. Decreasing an item already at zero is a
        no-op.
        
        Args:
            item_id: Id of the item.
            direction: "increase" or "decrease".
            
        Returns:
            The item, or None if the id or direction is unknown.
        """
        try:
            change = StockChange(direction)
        except ValueError:
            logger.debug("Rejected adjust: unknown direction %r", direction)
            return None
        
        item = self.get(item_id)
        if item is None:
            logger.debug("Rejected adjust: unknown id %s", item_id)
            return None
        
        if change is StockChange.INCREASE:
            item.stock_quantity += 1
        elif item.stock_quantity > 0:
            item.stock_quantity -= 1
        else:
            return item
        
        self.persist()
        return item
    
    def rename(self, item_id: int, new_name: Optional[str]) -> Optional[Item]:
        """
        Replace an item's name.
        
        Args:
            item_id: Id of the item.
            new_name: Replacement name. None means the request was cancelled.
            
        Returns:
            The renamed item, or None if nothing changed.
        """
        new_name = (new_name or "").strip()
        if not new_name:
            logger.debug("Rejected rename of %s: blank name", item_id)
            return None
        
        item = self.get(item_id)
        if item is None:
            logger.debug("Rejected rename: unknown id %s", item_id)
            return None
        
        item.name = new_name
        self.persist()
        return item
    
    def clear_zero_stock(self) -> int:
        """
        Remove every item with zero quantity.
        
        Returns:
            Number of items removed.
        """
        kept = [item for item in self._items if item.stock_quantity > 0]
        removed = len(self._items) - len(kept)
        if removed:
            self._items = kept
            self.persist()
        return removed
    
    # Queries
    
    @property
    def items(self) -> list[Item]:
        """All items in insertion order."""
        return list(self._items)
    
    def get(self, item_id: int) -> Optional[Item]:
        """
        Get an item by id.
        
        Returns:
            The item, or None if no item has that id.
        """
        for item in self._items:
            if item.id == item_id:
                return item
        return None
    
    def __len__(self) -> int:
        """Return the number of items."""
        return len(self._items)
    
    def __iter__(self) -> Iterator[Item]:
        """Iterate over items in insertion order."""
        return iter(self._items)
    
    def __contains__(self, item_id: int) -> bool:
        """Check if an item id is present."""
        return self.get(item_id) is not None
