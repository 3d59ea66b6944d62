"""Farmer registry: farmers, milk tracking entries and farmer payments."""

from typing import Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import (
    ChartSeries,
    FarmerPaymentStats,
    FarmerStats,
    MilkTrackingStats,
    Record,
)
from dairyops.domain.rules import (
    capitalized_alpha,
    digits,
    fixed_digits,
    one_of,
    positive_number,
    required,
    valid_date,
)
from dairyops.domain.schema import EntitySchema, Field, FieldKind
from dairyops.utils.text import digits_only

MILK_TRACKING_STATUSES = ("Delivered", "Pending")
FARMER_PAYMENT_STATUSES = ("Paid", "Pending")

NAME_MESSAGE = "Name must start with a capital letter and contain only alphabets."
VILLAGE_MESSAGE = "Village must start with a capital letter and contain only alphabets."
FARMER_NAME_MESSAGE = "Farmer name must start with a capital letter and contain only alphabets."


def farmer_statistics(records: Sequence[Record]) -> FarmerStats:
    return FarmerStats(
        total_farmers=aggregates.count(records),
        total_cows=int(aggregates.total(records, "cows")),
        village_count=len(aggregates.distinct(records, "village")),
    )


def farmer_chart(records: Sequence[Record]) -> ChartSeries:
    """Farmers per village."""
    return aggregates.series(aggregates.group_count(records, "village"))


def milk_tracking_statistics(records: Sequence[Record]) -> MilkTrackingStats:
    return MilkTrackingStats(
        total_entries=aggregates.count(records),
        total_quantity=aggregates.total(records, "quantity"),
        delivered_entries=aggregates.count_where(records, lambda r: r["status"] == "Delivered"),
        pending_entries=aggregates.count_where(records, lambda r: r["status"] == "Pending"),
    )


def milk_tracking_chart(records: Sequence[Record]) -> ChartSeries:
    """Quantity per delivery status."""
    return aggregates.series(
        aggregates.group_total(records, "status", "quantity", keys=MILK_TRACKING_STATUSES)
    )


def farmer_payment_statistics(records: Sequence[Record]) -> FarmerPaymentStats:
    by_status = aggregates.group_total(records, "status", "amount", keys=FARMER_PAYMENT_STATUSES)
    return FarmerPaymentStats(
        total_payments=aggregates.count(records),
        total_amount=aggregates.total(records, "amount"),
        paid_amount=by_status["Paid"],
        pending_amount=by_status["Pending"],
    )


def farmer_payment_chart(records: Sequence[Record]) -> ChartSeries:
    """Amount per payment status."""
    return aggregates.series(
        aggregates.group_total(records, "status", "amount", keys=FARMER_PAYMENT_STATUSES)
    )


FARMER_SCHEMA = EntitySchema(
    name="farmer",
    title="Farmer",
    command_name="farmers",
    fields=(
        Field("name", "Name", rules=(required(NAME_MESSAGE), capitalized_alpha(NAME_MESSAGE))),
        Field(
            "village",
            "Village",
            rules=(required(VILLAGE_MESSAGE), capitalized_alpha(VILLAGE_MESSAGE)),
        ),
        Field(
            "phone",
            "Phone",
            rules=(
                required("Phone must be a 10-digit number."),
                fixed_digits(10, "Phone must be a 10-digit number."),
            ),
            normalizers=(digits_only,),
        ),
        Field(
            "cows",
            "No. of Cows",
            FieldKind.INTEGER,
            rules=(digits("No. of Cows must be a number."),),
        ),
        Field(
            "milk_breed",
            "Milk Breed",
            rules=(
                capitalized_alpha(
                    "Milk Breed must start with a capital letter and contain only alphabets."
                ),
            ),
        ),
        Field(
            "joined_date",
            "Joined",
            FieldKind.DATE,
            rules=(valid_date("Please select a valid date."),),
        ),
    ),
    statistics=farmer_statistics,
    chart=farmer_chart,
    search_fields=("name", "village"),
)

MILK_TRACKING_SCHEMA = EntitySchema(
    name="milk_tracking",
    title="Milk Tracking",
    command_name="milk-tracking",
    fields=(
        Field(
            "farmer",
            "Farmer",
            rules=(required(FARMER_NAME_MESSAGE), capitalized_alpha(FARMER_NAME_MESSAGE)),
        ),
        Field(
            "date",
            "Date",
            FieldKind.DATE,
            rules=(required("Date is required."), valid_date("Date is required.")),
        ),
        Field(
            "quantity",
            "Quantity (L)",
            FieldKind.DECIMAL,
            rules=(
                required("Quantity must be a positive number."),
                positive_number("Quantity must be a positive number."),
            ),
        ),
        Field(
            "status",
            "Status",
            rules=(
                required("Status must be Delivered or Pending."),
                one_of(MILK_TRACKING_STATUSES, "Status must be Delivered or Pending."),
            ),
            choices=MILK_TRACKING_STATUSES,
        ),
    ),
    statistics=milk_tracking_statistics,
    chart=milk_tracking_chart,
)

FARMER_PAYMENT_SCHEMA = EntitySchema(
    name="farmer_payment",
    title="Farmer Payment",
    command_name="farmer-payments",
    fields=(
        Field(
            "farmer",
            "Farmer",
            rules=(required(FARMER_NAME_MESSAGE), capitalized_alpha(FARMER_NAME_MESSAGE)),
        ),
        Field(
            "amount",
            "Amount",
            FieldKind.DECIMAL,
            rules=(
                required("Amount must be a positive number."),
                positive_number("Amount must be a positive number."),
            ),
        ),
        Field(
            "date",
            "Date",
            FieldKind.DATE,
            rules=(required("Date is required."), valid_date("Date is required.")),
        ),
        Field(
            "status",
            "Status",
            rules=(
                required("Status must be Paid or Pending."),
                one_of(FARMER_PAYMENT_STATUSES, "Status must be Paid or Pending."),
            ),
            choices=FARMER_PAYMENT_STATUSES,
        ),
    ),
    statistics=farmer_payment_statistics,
    chart=farmer_payment_chart,
)
