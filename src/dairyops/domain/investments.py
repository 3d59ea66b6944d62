"""Investment records and per-type investment statistics."""

from typing import Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, InvestmentStats, Record
from dairyops.domain.rules import (
    matches,
    max_length,
    one_of,
    positive_integer,
    prefixed_id,
    required,
    starts_with_capital,
    valid_date,
)
from dairyops.domain.schema import EntitySchema, Field, FieldKind
from dairyops.utils.text import capitalize_first

INVESTMENT_TYPES = ("Equity", "Debt", "Grant", "Angel", "Venture Capital", "Other")

REMARKS_MAX_LENGTH = 120


def investment_statistics(records: Sequence[Record]) -> InvestmentStats:
    """Investment summary.

    The top type is the investment type with the largest total amount; ties
    go to the type recorded first.
    """
    type_totals = {
        kind: int(amount)
        for kind, amount in aggregates.group_total(records, "investment_type", "amount").items()
    }
    total_amount = int(aggregates.total(records, "amount"))
    total_investments = aggregates.count(records)

    return InvestmentStats(
        total_investments=total_investments,
        total_amount=total_amount,
        average_amount=int(aggregates.average(total_amount, total_investments, places="1")),
        top_type=aggregates.top_key(type_totals),
        type_totals=type_totals,
    )


def investment_chart(records: Sequence[Record]) -> ChartSeries:
    """Total amount per investment type, in first-seen order."""
    return aggregates.series(aggregates.group_total(records, "investment_type", "amount"))


INVESTMENT_SCHEMA = EntitySchema(
    name="investment",
    title="Investment",
    command_name="investments",
    fields=(
        Field(
            "investment_id",
            "Investment ID",
            rules=(
                required("Investment ID is required."),
                prefixed_id(
                    "INVST",
                    "Investment ID must be in format INVST followed by 4+ digits (e.g., INVST1001).",
                ),
            ),
        ),
        Field(
            "investor_name",
            "Investor Name",
            rules=(
                required("Investor Name is required."),
                matches(
                    r"[A-Z][a-zA-Z ]{2,39}",
                    "Investor Name must start with a capital letter and be 3-40 letters/spaces.",
                ),
            ),
            normalizers=(capitalize_first,),
        ),
        Field(
            "investment_type",
            "Type",
            rules=(
                required("Please select an investment type."),
                one_of(INVESTMENT_TYPES, "Please select an investment type."),
            ),
            choices=INVESTMENT_TYPES,
        ),
        Field(
            "amount",
            "Amount",
            FieldKind.INTEGER,
            rules=(
                required("Amount is required."),
                positive_integer("Amount must be a positive number."),
            ),
        ),
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
            "remarks",
            "Remarks",
            rules=(
                max_length(REMARKS_MAX_LENGTH, "Remarks must be less than 120 characters."),
                starts_with_capital("Remarks must start with a capital letter."),
            ),
            normalizers=(capitalize_first,),
        ),
    ),
    statistics=investment_statistics,
    chart=investment_chart,
)
