"""Milk collection: milk sales by type and the unsold stock log."""

from typing import Any, Optional, Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, MilkSalesStats, Record, UnsoldStockStats
from dairyops.domain.rules import (
    capitalized_alpha,
    one_of,
    positive_number,
    required,
    valid_date,
)
from dairyops.domain.schema import EntitySchema, Field, FieldKind
from dairyops.utils.text import capitalize_first, letters_only

MILK_TYPES = ("Cow", "Buffalo", "Goat", "Mixed")

CAPITALIZED_MESSAGE = "First letter must be capital; alphabets only"
QUANTITY_MESSAGE = "Please enter a quantity greater than 0."
RATE_MESSAGE = "Please enter a rate greater than 0."


def compute_sale_total(
    values: dict[str, Any], record_id: int, previous: Optional[Record]
) -> dict[str, Any]:
    """total = quantity x rate, recomputed on every commit."""
    return {**values, "total": values["quantity"] * values["rate"]}


def milk_sales_statistics(records: Sequence[Record]) -> MilkSalesStats:
    """Sales totals.

    The high-demand type is the milk type with the most liters sold, or
    "N/A" before any sale is recorded.
    """
    type_totals = aggregates.group_total(records, "milk_type", "quantity", keys=MILK_TYPES)
    sold = aggregates.total(records, "quantity")
    earnings = aggregates.total(records, "total")

    return MilkSalesStats(
        total_milk_sold=sold,
        total_earnings=earnings,
        average_price=aggregates.average(earnings, sold),
        high_demand_type=aggregates.top_key(type_totals) if records else aggregates.NO_DATA,
        milk_type_totals=type_totals,
    )


def milk_sales_chart(records: Sequence[Record]) -> ChartSeries:
    """Liters sold per milk type."""
    return aggregates.series(
        aggregates.group_total(records, "milk_type", "quantity", keys=MILK_TYPES)
    )


def unsold_stock_statistics(records: Sequence[Record]) -> UnsoldStockStats:
    return UnsoldStockStats(
        total_entries=aggregates.count(records),
        total_unsold=aggregates.total(records, "quantity"),
    )


def unsold_stock_chart(records: Sequence[Record]) -> ChartSeries:
    """Unsold quantity per day."""
    totals = aggregates.group_total(records, "date", "quantity")
    return aggregates.series({day.isoformat(): value for day, value in totals.items()})


MILK_SALE_SCHEMA = EntitySchema(
    name="milk_sale",
    title="Milk Sale",
    command_name="milk-sales",
    fields=(
        Field(
            "name",
            "Customer",
            rules=(required("Name is required"), capitalized_alpha(CAPITALIZED_MESSAGE)),
            normalizers=(letters_only, capitalize_first),
        ),
        Field(
            "village",
            "Village",
            rules=(required("Village is required"), capitalized_alpha(CAPITALIZED_MESSAGE)),
            normalizers=(letters_only, capitalize_first),
        ),
        Field(
            "milk_type",
            "Milk Type",
            rules=(
                required("Please select a milk type."),
                one_of(MILK_TYPES, "Please select a milk type."),
            ),
            choices=MILK_TYPES,
        ),
        Field(
            "quantity",
            "Quantity (L)",
            FieldKind.DECIMAL,
            rules=(required(QUANTITY_MESSAGE), positive_number(QUANTITY_MESSAGE)),
        ),
        Field(
            "rate",
            "Rate",
            FieldKind.DECIMAL,
            rules=(required(RATE_MESSAGE), positive_number(RATE_MESSAGE)),
        ),
        Field("total", "Total", FieldKind.DECIMAL, computed=True),
    ),
    compute=compute_sale_total,
    statistics=milk_sales_statistics,
    chart=milk_sales_chart,
)

UNSOLD_STOCK_SCHEMA = EntitySchema(
    name="unsold_stock",
    title="Unsold Stock",
    command_name="unsold-stock",
    fields=(
        Field(
            "date",
            "Date",
            FieldKind.DATE,
            rules=(
                required("Please select a valid date."),
                valid_date("Please select a valid date."),
            ),
        ),
        Field(
            "quantity",
            "Quantity (L)",
            FieldKind.DECIMAL,
            rules=(required(QUANTITY_MESSAGE), positive_number(QUANTITY_MESSAGE)),
        ),
    ),
    statistics=unsold_stock_statistics,
    chart=unsold_stock_chart,
)
