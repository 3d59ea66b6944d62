"""Inventory items: stock on hand, expiry and out-of-stock tracking."""

from datetime import date
from typing import Optional, Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, InventoryStats, Record
from dairyops.domain.rules import (
    date_not_before,
    matches,
    one_of,
    positive_integer,
    prefixed_id,
    required,
    valid_date,
)
from dairyops.domain.schema import EntitySchema, Field, FieldKind
from dairyops.utils.text import capitalize_first

CATEGORIES = ("Raw Material", "Packaging", "Machinery", "Cleaning", "Other")
UNITS = ("Kg", "Litre", "Piece", "Packet", "Box")
SUPPLIERS = ("DairySupplies Ltd.", "Farmers Co.", "AgroMart", "Local Vendor")
LOCATIONS = ("Main Store", "Cold Storage", "Packing Unit", "Machinery Shed", "Other")
STATUSES = ("Available", "Reserved", "Used", "Expired")

EXPIRY_WINDOW_DAYS = 7

ITEM_ID_MESSAGE = "Item ID must start with 'INV' followed by at least 4 digits (e.g., INV1001)."


def inventory_statistics(records: Sequence[Record], today: Optional[date] = None) -> InventoryStats:
    """Inventory summary.

    Args:
        records: Inventory items
        today: Reference day for the expiry window (defaults to date.today())
    """
    return InventoryStats(
        total_items=aggregates.count(records),
        expiring_soon=aggregates.expiring_within(records, "expiry", EXPIRY_WINDOW_DAYS, today),
        out_of_stock=aggregates.count_where(records, lambda r: r["quantity"] == 0),
        category_counts=aggregates.group_count(records, "category"),
    )


def inventory_chart(records: Sequence[Record]) -> ChartSeries:
    """Items per category."""
    return aggregates.series(aggregates.group_count(records, "category"))


INVENTORY_SCHEMA = EntitySchema(
    name="inventory_item",
    title="Inventory Item",
    command_name="inventory",
    fields=(
        Field(
            "item_id",
            "Item ID",
            rules=(required(ITEM_ID_MESSAGE), prefixed_id("INV", ITEM_ID_MESSAGE)),
        ),
        Field(
            "item_name",
            "Name",
            rules=(
                required(
                    "Item Name must start with a capital letter and be 3-40 letters/numbers/spaces."
                ),
                matches(
                    r"[A-Z][a-zA-Z0-9 \-]{2,39}",
                    "Item Name must start with a capital letter and be 3-40 letters/numbers/spaces.",
                ),
            ),
            normalizers=(capitalize_first,),
        ),
        Field(
            "category",
            "Category",
            rules=(
                required("Please select a category."),
                one_of(CATEGORIES, "Please select a category."),
            ),
            choices=CATEGORIES,
        ),
        Field(
            "quantity",
            "Quantity",
            FieldKind.INTEGER,
            rules=(
                required("Quantity must be a positive integer."),
                positive_integer("Quantity must be a positive integer."),
            ),
        ),
        Field(
            "unit",
            "Unit",
            rules=(required("Please select a unit."), one_of(UNITS, "Please select a unit.")),
            choices=UNITS,
        ),
        Field(
            "supplier",
            "Supplier",
            rules=(
                required("Please select a supplier."),
                one_of(SUPPLIERS, "Please select a supplier."),
            ),
            choices=SUPPLIERS,
        ),
        Field(
            "location",
            "Location",
            rules=(
                required("Please select a location."),
                one_of(LOCATIONS, "Please select a location."),
            ),
            choices=LOCATIONS,
        ),
        Field(
            "received_date",
            "Received",
            FieldKind.DATE,
            rules=(
                required("Please select received date."),
                valid_date("Please select received date."),
            ),
        ),
        Field(
            "expiry",
            "Expiry",
            FieldKind.DATE,
            rules=(valid_date("Please select a valid expiry date."),),
        ),
        Field(
            "status",
            "Status",
            rules=(required("Please select status."), one_of(STATUSES, "Please select status.")),
            choices=STATUSES,
        ),
        Field("notes", "Notes"),
    ),
    record_rules=(
        date_not_before("expiry", "received_date", "Expiry date must be after received date."),
    ),
    statistics=inventory_statistics,
    chart=inventory_chart,
    list_fields=(
        "item_id",
        "item_name",
        "category",
        "quantity",
        "unit",
        "supplier",
        "location",
        "received_date",
        "expiry",
        "status",
    ),
)
