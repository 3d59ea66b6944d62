"""Home dashboard lists: milk production by state and recent milk entries."""

from typing import Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, MilkEntryStats, MilkProductionStats, Record
from dairyops.domain.rules import numeric, one_of, required
from dairyops.domain.schema import EntitySchema, Field, FieldKind

MILK_SHIFTS = ("Morning", "Evening")

STATE_MESSAGE = "Please enter a valid state name and numeric value."
ENTRY_MESSAGE = "Please fill all fields."


def milk_production_statistics(records: Sequence[Record]) -> MilkProductionStats:
    """Production summary.

    The top state is the one with the largest total production; ties go to
    the state recorded first.
    """
    return MilkProductionStats(
        total_states=len(aggregates.distinct(records, "state")),
        total_production=aggregates.total(records, "value"),
        top_state=aggregates.top_key(aggregates.group_total(records, "state", "value")),
    )


def milk_production_chart(records: Sequence[Record]) -> ChartSeries:
    """Production per state, in first-seen order."""
    return aggregates.series(aggregates.group_total(records, "state", "value"))


def milk_entry_statistics(records: Sequence[Record]) -> MilkEntryStats:
    return MilkEntryStats(
        total_entries=aggregates.count(records),
        total_quantity=aggregates.total(records, "quantity"),
        shift_totals=aggregates.group_total(records, "shift", "quantity", keys=MILK_SHIFTS),
    )


def milk_entry_chart(records: Sequence[Record]) -> ChartSeries:
    """Liters collected per shift."""
    return aggregates.series(
        aggregates.group_total(records, "shift", "quantity", keys=MILK_SHIFTS)
    )


MILK_PRODUCTION_SCHEMA = EntitySchema(
    name="milk_production",
    title="Milk Production",
    command_name="milk-production",
    fields=(
        Field("state", "State", rules=(required(STATE_MESSAGE),)),
        Field(
            "value",
            "Production (tonnes)",
            FieldKind.DECIMAL,
            rules=(required(STATE_MESSAGE), numeric(STATE_MESSAGE)),
        ),
    ),
    statistics=milk_production_statistics,
    chart=milk_production_chart,
)

MILK_ENTRY_SCHEMA = EntitySchema(
    name="milk_entry",
    title="Milk Entry",
    command_name="milk-entries",
    fields=(
        Field("name", "Farmer Name", rules=(required(ENTRY_MESSAGE),)),
        Field("village", "Village", rules=(required(ENTRY_MESSAGE),)),
        Field(
            "shift",
            "Shift",
            rules=(required(ENTRY_MESSAGE), one_of(MILK_SHIFTS, ENTRY_MESSAGE)),
            choices=MILK_SHIFTS,
            default="Morning",
        ),
        Field(
            "quantity",
            "Quantity (L)",
            FieldKind.DECIMAL,
            rules=(required(ENTRY_MESSAGE), numeric(ENTRY_MESSAGE)),
        ),
        # Free text such as "06:30 AM"
        Field("time", "Time", rules=(required(ENTRY_MESSAGE),)),
    ),
    statistics=milk_entry_statistics,
    chart=milk_entry_chart,
    newest_first=True,
)
