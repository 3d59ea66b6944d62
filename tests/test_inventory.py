"""Tests for inventory items."""

from datetime import date, datetime, UTC
from dairyops.domain.entities import Record
from dairyops.domain.inventory import (
    INVENTORY_SCHEMA,
    ITEM_ID_MESSAGE,
    inventory_statistics,
)


def _item(**overrides):
    return {
        "item_id": "INV1001",
        "item_name": "Milk cans",
        "category": "Packaging",
        "quantity": "20",
        "unit": "Piece",
        "supplier": "AgroMart",
        "location": "Main Store",
        "received_date": "2024-01-10",
        "expiry": "2024-02-10",
        "status": "Available",
        **overrides,
    }


class TestInventoryValidation:
    def test_valid_item(self):
        assert INVENTORY_SCHEMA.validate(_item()) == {}

    def test_bad_item_id(self):
        """Test 'inv1' is rejected while INV1001 is accepted."""
        assert INVENTORY_SCHEMA.validate(_item(item_id="inv1")) == {"item_id": ITEM_ID_MESSAGE}
        assert INVENTORY_SCHEMA.validate(_item(item_id="")) == {"item_id": ITEM_ID_MESSAGE}

    def test_quantity_must_be_positive_integer(self):
        errors = INVENTORY_SCHEMA.validate(_item(quantity="2.5"))
        assert errors == {"quantity": "Quantity must be a positive integer."}

    def test_unknown_choice(self):
        errors = INVENTORY_SCHEMA.validate(_item(unit="Gallon", location="Roof"))
        assert errors == {
            "unit": "Please select a unit.",
            "location": "Please select a location.",
        }

    def test_expiry_before_received(self):
        errors = INVENTORY_SCHEMA.validate(_item(expiry="2024-01-01"))
        assert errors == {"expiry": "Expiry date must be after received date."}

    def test_expiry_is_optional(self):
        assert INVENTORY_SCHEMA.validate(_item(expiry="")) == {}


class TestInventoryManager:
    def test_add_item(self, inventory_manager, submit_form):
        record = submit_form(inventory_manager, **_item(item_name="milk cans", notes="Stacked"))

        assert record["item_name"] == "Milk cans"
        assert record["quantity"] == 20
        assert record["expiry"] == date(2024, 2, 10)
        assert record["notes"] == "Stacked"

    def test_rejected_item_is_not_stored(self, inventory_manager, submit_form):
        assert submit_form(inventory_manager, **_item(item_id="inv1")) is None
        assert inventory_manager.errors == {"item_id": ITEM_ID_MESSAGE}
        assert inventory_manager.records() == []


class TestInventoryStatistics:
    def _records(self):
        def record(record_id, category, quantity, expiry):
            values = {"category": category, "quantity": quantity, "expiry": expiry}
            return Record(id=record_id, values=values, created_at=datetime.now(UTC))

        return [
            record(1, "Packaging", 20, date(2024, 2, 10)),
            record(2, "Packaging", 0, None),
            record(3, "Cleaning", 5, date(2024, 2, 20)),
            record(4, "Raw Material", 8, date(2024, 2, 1)),
        ]

    def test_statistics(self):
        stats = inventory_statistics(self._records(), today=date(2024, 2, 5))

        assert stats.total_items == 4
        assert stats.expiring_soon == 1
        assert stats.out_of_stock == 1
        assert stats.category_counts == {"Packaging": 2, "Cleaning": 1, "Raw Material": 1}

    def test_chart(self, inventory_manager, submit_form):
        submit_form(inventory_manager, **_item())
        submit_form(inventory_manager, **_item(item_id="INV1002", category="Cleaning"))

        chart = inventory_manager.chart()
        assert chart.labels == ["Packaging", "Cleaning"]
        assert chart.values == [1.0, 1.0]


def test_inventory_scenario(inventory_manager, submit_form):
    """Test INV1001 is stored and 'inv1' is rejected without insertion."""
    record = submit_form(
        inventory_manager,
        item_id="INV1001",
        item_name="Milk Can",
        category="Packaging",
        quantity="50",
        unit="Piece",
        supplier="AgroMart",
        location="Main Store",
        received_date="2024-01-01",
        expiry="2024-01-10",
        status="Available",
    )
    assert record is not None
    assert len(inventory_manager.records()) == 1
    assert inventory_manager.statistics().out_of_stock == 0

    assert submit_form(inventory_manager, **_item(item_id="inv1")) is None
    assert "item_id" in inventory_manager.errors
    assert len(inventory_manager.records()) == 1
