"""Domain model entities for dairyops.

These are pure data classes representing business concepts, independent of
the store backend. Records hold typed field values keyed by field name; the
statistics classes are the aggregates computed from a list of records.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping


@dataclass(frozen=True)
class Record:
    """One stored entity instance."""

    id: int
    values: Mapping[str, Any]
    created_at: datetime

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)


@dataclass(frozen=True)
class ChartSeries:
    """Labels and values consumed by a chart renderer."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class FarmerStats:
    """Farmer registry summary."""

    total_farmers: int
    total_cows: int
    village_count: int


@dataclass(frozen=True)
class MilkTrackingStats:
    """Milk tracking summary."""

    total_entries: int
    total_quantity: Decimal
    delivered_entries: int
    pending_entries: int


@dataclass(frozen=True)
class FarmerPaymentStats:
    """Farmer payment summary."""

    total_payments: int
    total_amount: Decimal
    paid_amount: Decimal
    pending_amount: Decimal


@dataclass(frozen=True)
class InventoryStats:
    """Inventory summary."""

    total_items: int
    expiring_soon: int
    out_of_stock: int
    category_counts: dict[str, int]


@dataclass(frozen=True)
class InvestmentStats:
    """Investment summary."""

    total_investments: int
    total_amount: int
    average_amount: int
    top_type: str
    type_totals: dict[str, int]


@dataclass(frozen=True)
class MilkSalesStats:
    """Milk collection sales summary."""

    total_milk_sold: Decimal
    total_earnings: Decimal
    average_price: Decimal
    high_demand_type: str
    milk_type_totals: dict[str, Decimal]


@dataclass(frozen=True)
class UnsoldStockStats:
    """Unsold milk stock summary."""

    total_entries: int
    total_unsold: Decimal


@dataclass(frozen=True)
class PaymentStats:
    """Payment transaction summary."""

    total_payments: int
    total_amount: Decimal
    completed_payments: int
    pending_payments: int
    success_rate: float


@dataclass(frozen=True)
class SettingsStats:
    """Settings profile summary."""

    total_profiles: int


@dataclass(frozen=True)
class MilkProductionStats:
    """Milk production by state summary."""

    total_states: int
    total_production: Decimal
    top_state: str


@dataclass(frozen=True)
class MilkEntryStats:
    """Recent milk entries summary."""

    total_entries: int
    total_quantity: Decimal
    shift_totals: dict[str, Decimal]
