"""
Unit tests for the inventory store.
"""

import json
from pathlib import Path

import pytest

from stock_tracker.models.item import StockChange
from stock_tracker.store.inventory_store import InventoryStore, parse_quantity
from stock_tracker.store.storage import BaseStorage, JsonFileStorage, MemoryStorage


class FailingStorage(MemoryStorage):
    """Storage whose writes always fail."""

    def set_item(self, key: str, value: str) -> None:
        raise OSError("quota exceeded")


class TestParseQuantity:
    """Tests for parse_quantity."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("3", 3),
            (" 12 ", 12),
            ("0", 0),
            ("+4", 4),
            (7, 7),
            (0, 0),
        ],
    )
    def test_valid(self, value, expected: int) -> None:
        """Test accepted quantities."""
        assert parse_quantity(value) == expected

    @pytest.mark.parametrize("value", ["", "  ", "-1", "abc", "3.5", "1e3", -1, True, None, 2.0])
    def test_invalid(self, value) -> None:
        """Test rejected quantities."""
        assert parse_quantity(value) is None


class TestAdd:
    """Tests for InventoryStore.add."""

    def test_add_item(self, store: InventoryStore) -> None:
        """Test adding a valid item."""
        item = store.add("Widget", "3")

        assert item is not None
        assert len(store) == 1
        assert item.name == "Widget"
        assert item.stock_quantity == 3
        assert item.price == 0

    def test_add_trims_name(self, store: InventoryStore) -> None:
        """Test that names are stored trimmed."""
        item = store.add("  Widget ", 1)
        assert item is not None
        assert item.name == "Widget"

    def test_add_preserves_insertion_order(self, store: InventoryStore) -> None:
        """Test that items are appended."""
        store.add("B", 1)
        store.add("A", 2)
        store.add("C", 3)

        assert [item.name for item in store] == ["B", "A", "C"]

    def test_ids_are_unique(self, store: InventoryStore) -> None:
        """Test that rapid adds still get distinct, increasing ids."""
        ids = [store.add(f"item {i}", i).id for i in range(50)]

        assert len(set(ids)) == 50
        assert ids == sorted(ids)

    @pytest.mark.parametrize(
        "name,quantity",
        [("", "3"), ("   ", "3"), ("Widget", "-1"), ("Widget", "abc"), ("Widget", "")],
    )
    def test_invalid_add_is_noop(self, store: InventoryStore, name: str, quantity: str) -> None:
        """Test that invalid input leaves the collection unchanged."""
        store.add("Existing", "1")

        assert store.add(name, quantity) is None
        assert [item.name for item in store] == ["Existing"]


class TestRemove:
    """Tests for InventoryStore.remove."""

    def test_remove(self, stocked_store: InventoryStore) -> None:
        """Test removing an item by id."""
        nut = stocked_store.items[1]

        assert stocked_store.remove(nut.id) is True
        assert nut.id not in stocked_store
        assert [item.name for item in stocked_store] == ["Bolt", "Washer", "Anchor"]

    def test_remove_unknown(self, stocked_store: InventoryStore) -> None:
        """Test removing an unknown id."""
        assert stocked_store.remove(-1) is False
        assert len(stocked_store) == 4


class TestAdjustQuantity:
    """Tests for InventoryStore.adjust_quantity."""

    def test_increase(self, store: InventoryStore) -> None:
        """Test that increase always adds one."""
        item = store.add("Widget", "0")
        for expected in range(1, 6):
            store.adjust_quantity(item.id, StockChange.INCREASE)
            assert item.stock_quantity == expected

    def test_decrease(self, store: InventoryStore) -> None:
        """Test that decrease subtracts one."""
        item = store.add("Widget", "2")
        store.adjust_quantity(item.id, "decrease")
        assert item.stock_quantity == 1

    def test_decrease_at_zero(self, store: InventoryStore) -> None:
        """Test that decrease stops at zero."""
        item = store.add("Widget", "0")

        assert store.adjust_quantity(item.id, "decrease") is item
        assert item.stock_quantity == 0

    def test_unknown_id(self, store: InventoryStore) -> None:
        """Test adjusting an unknown item."""
        assert store.adjust_quantity(12345, "increase") is None

    def test_unknown_direction(self, store: InventoryStore) -> None:
        """Test an unknown direction is a no-op."""
        item = store.add("Widget", "2")

        assert store.adjust_quantity(item.id, "sideways") is None
        assert item.stock_quantity == 2


class TestRename:
    """Tests for InventoryStore.rename."""

    def test_rename(self, store: InventoryStore) -> None:
        """Test renaming an item."""
        item = store.add("Widget", "1")
        store.rename(item.id, "  Gadget  ")
        assert store.get(item.id).name == "Gadget"

    @pytest.mark.parametrize("new_name", ["", "   ", None])
    def test_blank_or_cancelled(self, store: InventoryStore, new_name) -> None:
        """Test that a blank or cancelled rename keeps the name."""
        item = store.add("Widget", "1")

        assert store.rename(item.id, new_name) is None
        assert item.name == "Widget"

    def test_unknown_id(self, store: InventoryStore) -> None:
        """Test renaming an unknown item."""
        assert store.rename(999, "Gadget") is None


class TestClearZeroStock:
    """Tests for InventoryStore.clear_zero_stock."""

    def test_removes_only_zero_stock(self, stocked_store: InventoryStore) -> None:
        """Test that all and only zero-stock items are removed."""
        assert stocked_store.clear_zero_stock() == 1
        assert [item.name for item in stocked_store] == ["Bolt", "nut", "Anchor"]

    def test_idempotent(self, stocked_store: InventoryStore) -> None:
        """Test that a second sweep removes nothing."""
        stocked_store.clear_zero_stock()
        before = stocked_store.items

        assert stocked_store.clear_zero_stock() == 0
        assert stocked_store.items == before


class TestPersistence:
    """Tests for persisting and loading the collection."""

    def test_every_mutation_persists(self, store: InventoryStore, memory_storage: MemoryStorage) -> None:
        """Test that the stored snapshot follows each mutation."""
        item = store.add("Widget", "3")
        assert json.loads(memory_storage.get_item("inventory"))[0]["stockQuantity"] == 3

        store.adjust_quantity(item.id, "decrease")
        assert json.loads(memory_storage.get_item("inventory"))[0]["stockQuantity"] == 2

        store.rename(item.id, "Gadget")
        assert json.loads(memory_storage.get_item("inventory"))[0]["name"] == "Gadget"

        store.remove(item.id)
        assert json.loads(memory_storage.get_item("inventory")) == []

    def test_stored_layout(self, store: InventoryStore, memory_storage: MemoryStorage) -> None:
        """Test the serialized record layout."""
        item = store.add("Widget", "3")

        assert json.loads(memory_storage.get_item("inventory")) == [
            {"id": item.id, "name": "Widget", "stockQuantity": 3, "price": 0}
        ]

    def test_round_trip(self, file_storage: JsonFileStorage, storage_file: Path) -> None:
        """Test that reloading reproduces the collection."""
        original = InventoryStore(file_storage)
        original.add("Bolt", "10")
        original.add("Nut", "2")

        reloaded = InventoryStore(JsonFileStorage(storage_file))

        assert reloaded.items == original.items

    def test_ids_stay_unique_after_reload(self, memory_storage: MemoryStorage) -> None:
        """Test that new ids never collide with loaded ones."""
        future_id = 10 ** 15
        memory_storage.set_item(
            "inventory",
            json.dumps([{"id": future_id, "name": "Bolt", "stockQuantity": 1, "price": 0}]),
        )
        store = InventoryStore(memory_storage)

        item = store.add("Nut", "1")

        assert item.id == future_id + 1

    def test_custom_key(self, memory_storage: MemoryStorage) -> None:
        """Test persisting to a different slot."""
        store = InventoryStore(memory_storage, key="warehouse")
        store.add("Bolt", "1")

        assert memory_storage.get_item("inventory") is None
        assert memory_storage.get_item("warehouse") is not None

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            "null",
            '{"id": 1}',
            '[{"id": 1, "name": "", "stockQuantity": 1, "price": 0}]',
            '[{"id": 1, "name": "Bolt", "stockQuantity": -3, "price": 0}]',
            '[{"id": 1, "name": "A", "stockQuantity": 1, "price": 0},'
            ' {"id": 1, "name": "B", "stockQuantity": 1, "price": 0}]',
        ],
    )
    def test_malformed_snapshot_loads_empty(self, memory_storage: MemoryStorage, raw: str) -> None:
        """Test that bad stored data degrades to an empty collection."""
        memory_storage.set_item("inventory", raw)

        assert InventoryStore(memory_storage).items == []

    def test_unreadable_file_loads_empty(self, storage_file: Path) -> None:
        """Test that a corrupt storage file does not fail startup."""
        storage_file.parent.mkdir(parents=True)
        storage_file.write_text("garbage", encoding="utf-8")

        assert len(InventoryStore(JsonFileStorage(storage_file))) == 0

    def test_write_failure_does_not_raise(self) -> None:
        """Test that persistence is best effort."""
        store = InventoryStore(FailingStorage())

        item = store.add("Widget", "3")

        assert item is not None
        assert len(store) == 1

    def test_autoload_disabled(self, memory_storage: MemoryStorage) -> None:
        """Test that autoload=False starts empty until load() is called."""
        InventoryStore(memory_storage).add("Bolt", "1")

        store = InventoryStore(memory_storage, autoload=False)
        assert len(store) == 0

        store.load()
        assert len(store) == 1


def test_storage_interface_is_abstract() -> None:
    """Test that BaseStorage cannot be used directly."""
    with pytest.raises(TypeError):
        BaseStorage()  # type: ignore[abstract]


def test_widget_scenario(store: InventoryStore) -> None:
    """Test add, drain to zero, then sweep."""
    item = store.add("Widget", "3")
    assert [(i.name, i.stock_quantity) for i in store] == [("Widget", 3)]

    for _ in range(3):
        store.adjust_quantity(item.id, "decrease")
    assert item.stock_quantity == 0

    store.clear_zero_stock()
    assert store.items == []
