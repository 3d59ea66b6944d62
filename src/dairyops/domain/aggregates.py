"""Aggregation helpers over record lists.

All functions are pure: statistics are recomputed from the current records
on every read, so totals can never drift from the list they summarize.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from dairyops.domain.entities import ChartSeries, Record
from dairyops.utils.date_parser import days_until

NO_DATA = "N/A"


def count(records: Sequence[Record]) -> int:
    return len(records)


def total(records: Iterable[Record], field: str) -> Decimal:
    """Sum a numeric field, treating missing values as zero."""
    return sum((Decimal(record.get(field) or 0) for record in records), Decimal(0))


def count_where(records: Iterable[Record], predicate: Callable[[Record], bool]) -> int:
    return sum(1 for record in records if predicate(record))


def distinct(records: Iterable[Record], field: str) -> list[Any]:
    """Distinct values of a field in first-seen order."""
    seen: dict[Any, None] = {}
    for record in records:
        seen.setdefault(record.get(field), None)
    return list(seen)


def group_total(
    records: Iterable[Record], key: str, field: str, keys: Sequence[str] = ()
) -> dict[str, Decimal]:
    """Sum ``field`` per value of ``key``.

    Args:
        records: Records to group
        key: Field whose value names the group
        field: Numeric field to sum
        keys: Groups seeded with zero, in this order, before any record is seen

    Returns:
        Group -> total, in seeded order then first-seen order
    """
    totals: dict[str, Decimal] = {k: Decimal(0) for k in keys}
    for record in records:
        group = record.get(key)
        totals[group] = totals.get(group, Decimal(0)) + Decimal(record.get(field) or 0)
    return totals


def group_count(
    records: Iterable[Record], key: str, keys: Sequence[str] = ()
) -> dict[str, int]:
    """Count records per value of ``key``."""
    counts: dict[str, int] = defaultdict(int)
    for k in keys:
        counts[k] = 0
    for record in records:
        counts[record.get(key)] += 1
    return dict(counts)


def top_key(totals: Mapping[str, Any], empty: str = NO_DATA) -> str:
    """Return the key with the largest value.

    Ties go to the key encountered first; an empty mapping gives ``empty``.
    """
    best, best_value = empty, None
    for key, value in totals.items():
        if best_value is None or value > best_value:
            best, best_value = key, value
    return best


def round_half_up(value: Decimal, places: str) -> Decimal:
    """Round half-up to ``places``.

    The context precision is widened to fit every digit of the result, so
    large values never make quantize fail.
    """
    exponent = Decimal(places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent.as_tuple().exponent + 2)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def percentage(part: int, whole: int) -> float:
    """part / whole * 100 rounded half-up to one decimal (0 when whole is 0)."""
    if not whole:
        return 0.0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return float(round_half_up(ratio, "0.1"))


def average(amount: Decimal, divisor: Decimal, places: str = "0.01") -> Decimal:
    """amount / divisor rounded half-up to ``places`` (0 when divisor is 0)."""
    if not divisor:
        return Decimal(0)
    return round_half_up(Decimal(amount) / Decimal(divisor), places)


def expiring_within(
    records: Iterable[Record], field: str, days: int, today: Optional[date] = None
) -> int:
    """Count records whose date field falls between today and today + days."""
    return count_where(
        records,
        lambda record: record.get(field) is not None
        and 0 <= days_until(record.get(field), today) <= days,
    )


def series(values: Mapping[str, Any]) -> ChartSeries:
    """Turn a group mapping into chart labels and values."""
    return ChartSeries(
        labels=[str(label) for label in values],
        values=[float(value) for value in values.values()],
    )
