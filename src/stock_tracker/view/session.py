"""
Interactive session over an inventory store.

The session owns the transient state of one user's view: the selected
filter and sort order, the add-item form fields and the edit mode. It
routes user intents to the store and re-derives the view model after
every action.
"""

import logging
from typing import Callable, Optional, Union

from stock_tracker.models.item import StockChange
from stock_tracker.models.view import SortOrder, StockFilter, ViewModel
from stock_tracker.store.inventory_store import InventoryStore
from stock_tracker.view.derive import derive_view_model

logger = logging.getLogger(__name__)

# prompt(message, default) -> answer, or None when cancelled
PromptFunc = Callable[[str, str], Optional[str]]


class InventorySession:
    """
    Transient view state plus dispatch of user actions.
    
    Every action method returns the freshly derived view model.
    """
    
    def __init__(
        self,
        store: InventoryStore,
        prompt: Optional[PromptFunc] = None,
    ) -> None:
        """
        Initialize the session with default view state.
        
        Args:
            store: The store to read from and send mutations to.
            prompt: Blocking prompt used by edit(). Without one, renames go
                through begin_edit()/commit_edit().
        """
        self.store = store
        self.prompt = prompt
        self.filter = StockFilter.ALL
        self.sort_order = SortOrder.DEFAULT
        self.name_input = ""
        self.quantity_input = ""
        self.editing_id: Optional[int] = None
    
    def view(self) -> ViewModel:
        """Derive the view model for the current state."""
        return derive_view_model(self.store.items, self.filter, self.sort_order)
    
    # Add-item form
    
    def set_name_input(self, text: str) -> ViewModel:
        self.name_input = text
        return self.view()
    
    def set_quantity_input(self, text: str) -> ViewModel:
        self.quantity_input = text
        return self.view()
    
    def submit(self) -> ViewModel:
        """Add an item from the form fields, clearing them on success."""
        if self.store.add(self.name_input, self.quantity_input) is not None:
            self.name_input = ""
            self.quantity_input = ""
        return self.view()
    
    # Filter and sort
    
    def set_filter(self, stock_filter: Union[StockFilter, str]) -> ViewModel:
        self.filter = StockFilter(stock_filter)
        return self.view()
    
    def set_sort_order(self, sort_order: Union[SortOrder, str]) -> ViewModel:
        self.sort_order = SortOrder(sort_order)
        return self.view()
    
    # Per-item actions
    
    def increase(self, item_id: int) -> ViewModel:
        self.store.adjust_quantity(item_id, StockChange.INCREASE)
        return self.view()
    
    def decrease(self, item_id: int) -> ViewModel:
        self.store.adjust_quantity(item_id, StockChange.DECREASE)
        return self.view()
    
    def delete(self, item_id: int) -> ViewModel:
        self.store.remove(item_id)
        if self.editing_id == item_id:
            self.editing_id = None
        return self.view()
    
    def edit(self, item_id: int) -> ViewModel:
        """
        Rename an item using the blocking prompt.
        
        The prompt is seeded with the current name. A cancelled or blank
        answer leaves the item unchanged. Without a prompt this enters
        edit mode instead.
        """
        item = self.store.get(item_id)
        if item is None:
            return self.view()
        
        if self.prompt is None:
            return self.begin_edit(item_id)
        
        new_name = self.prompt(f"Edit name ({item.name})", item.name)
        self.store.rename(item_id, new_name)
        return self.view()
    
    def begin_edit(self, item_id: int) -> ViewModel:
        """Enter edit mode for an item. Unknown ids are ignored."""
        if item_id in self.store:
            self.editing_id = item_id
        return self.view()
    
    def commit_edit(self, new_name: Optional[str]) -> ViewModel:
        """Apply the pending rename, if any, and leave edit mode."""
        if self.editing_id is not None:
            self.store.rename(self.editing_id, new_name)
            self.editing_id = None
        return self.view()
    
    def cancel_edit(self) -> ViewModel:
        self.editing_id = None
        return self.view()
    
    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None
    
    # Bulk actions
    
    def clear_zero_stock(self) -> ViewModel:
        removed = self.store.clear_zero_stock()
        if removed:
            logger.info("Cleared %d zero-stock items", removed)
        return self.view()
