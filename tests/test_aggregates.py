"""Tests for aggregation helpers."""

from datetime import date, datetime, UTC
from decimal import Decimal
from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, Record


def _record(record_id, **values):
    return Record(id=record_id, values=values, created_at=datetime.now(UTC))


RECORDS = [
    _record(1, kind="Cow", quantity=Decimal("10")),
    _record(2, kind="Buffalo", quantity=Decimal("4.5")),
    _record(3, kind="Cow", quantity=Decimal("2")),
]


def test_count_and_total():
    assert aggregates.count(RECORDS) == 3
    assert aggregates.total(RECORDS, "quantity") == Decimal("16.5")
    assert aggregates.total([], "quantity") == 0


def test_total_treats_missing_values_as_zero():
    records = [_record(1, quantity=None), _record(2, quantity=Decimal("3"))]
    assert aggregates.total(records, "quantity") == Decimal("3")


def test_total_after_delete():
    """Removing a record lowers count by 1 and total by its value."""
    remaining = [r for r in RECORDS if r.id != 2]
    assert aggregates.count(remaining) == aggregates.count(RECORDS) - 1
    assert aggregates.total(remaining, "quantity") == aggregates.total(
        RECORDS, "quantity"
    ) - Decimal("4.5")


def test_count_where():
    assert aggregates.count_where(RECORDS, lambda r: r["kind"] == "Cow") == 2


def test_distinct_keeps_first_seen_order():
    assert aggregates.distinct(RECORDS, "kind") == ["Cow", "Buffalo"]


class TestGrouping:
    def test_group_total(self):
        assert aggregates.group_total(RECORDS, "kind", "quantity") == {
            "Cow": Decimal("12"),
            "Buffalo": Decimal("4.5"),
        }

    def test_group_total_seeded_keys(self):
        totals = aggregates.group_total([], "kind", "quantity", keys=("Cow", "Goat"))
        assert totals == {"Cow": 0, "Goat": 0}
        assert list(totals) == ["Cow", "Goat"]

    def test_group_count(self):
        assert aggregates.group_count(RECORDS, "kind") == {"Cow": 2, "Buffalo": 1}
        assert aggregates.group_count([], "kind") == {}


class TestTopKey:
    def test_largest_value(self):
        assert aggregates.top_key({"Debt": 3, "Equity": 7}) == "Equity"

    def test_tie_goes_to_first_key(self):
        assert aggregates.top_key({"Debt": 5, "Equity": 5}) == "Debt"

    def test_empty(self):
        assert aggregates.top_key({}) == "N/A"


class TestRatios:
    def test_percentage(self):
        assert aggregates.percentage(2, 3) == 66.7
        assert aggregates.percentage(1, 8) == 12.5
        assert aggregates.percentage(3, 3) == 100.0

    def test_percentage_of_nothing_is_zero(self):
        assert aggregates.percentage(0, 0) == 0

    def test_average_rounds_half_up(self):
        assert aggregates.average(Decimal("3"), 2, places="1") == Decimal("2")
        assert aggregates.average(Decimal("10"), 3) == Decimal("3.33")

    def test_average_of_nothing_is_zero(self):
        assert aggregates.average(Decimal("0"), 0) == 0

    def test_average_of_large_values_does_not_raise(self):
        """Test rounding widens the precision instead of failing on big quotients."""
        assert aggregates.average(Decimal("1e20"), Decimal("1e-7")) == Decimal("1e27")
        assert aggregates.average(Decimal("1" + "0" * 30), 1, places="1") == Decimal(10) ** 30


def test_expiring_within():
    today = date(2024, 2, 1)
    records = [
        _record(1, expiry=date(2024, 2, 1)),
        _record(2, expiry=date(2024, 2, 8)),
        _record(3, expiry=date(2024, 2, 9)),
        _record(4, expiry=date(2024, 1, 31)),
        _record(5, expiry=None),
    ]
    assert aggregates.expiring_within(records, "expiry", 7, today) == 2


def test_series():
    assert aggregates.series({"Cow": Decimal("12"), "Buffalo": Decimal("4.5")}) == ChartSeries(
        labels=["Cow", "Buffalo"], values=[12.0, 4.5]
    )
