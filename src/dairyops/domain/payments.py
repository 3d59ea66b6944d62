"""Payment transactions with generated transaction IDs."""

from datetime import date
from typing import Any, Optional, Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import ChartSeries, PaymentStats, Record
from dairyops.domain.rules import email, fixed_digits, matches, one_of, positive_number, required
from dairyops.domain.schema import EntitySchema, Field, FieldKind
from dairyops.utils.text import upper

PAYMENT_METHODS = (
    "CREDIT CARD",
    "DEBIT CARD",
    "NET BANKING",
    "UPI",
    "DIGITAL WALLET",
    "CASH",
    "CHEQUE",
    "BANK TRANSFER",
)
PAYMENT_STATUSES = ("COMPLETED", "PENDING", "PROCESSING", "FAILED", "CANCELLED")
OPEN_STATUSES = ("PENDING", "PROCESSING")


def transaction_id(record_id: int) -> str:
    """Format a record ID as a transaction ID, e.g. 7 -> TXN007."""
    return f"TXN{record_id:03d}"


def compute_transaction_fields(
    values: dict[str, Any], record_id: int, previous: Optional[Record]
) -> dict[str, Any]:
    """Stamp the transaction ID and date.

    Both are assigned when the payment is created and carried over unchanged
    when it is edited.
    """
    if previous is None:
        return {**values, "transaction_id": transaction_id(record_id), "date": date.today()}
    return {
        **values,
        "transaction_id": previous.get("transaction_id"),
        "date": previous.get("date"),
    }


def payment_statistics(records: Sequence[Record]) -> PaymentStats:
    total_payments = aggregates.count(records)
    completed = aggregates.count_where(records, lambda r: r["status"] == "COMPLETED")

    return PaymentStats(
        total_payments=total_payments,
        total_amount=aggregates.total(records, "amount"),
        completed_payments=completed,
        pending_payments=aggregates.count_where(records, lambda r: r["status"] in OPEN_STATUSES),
        success_rate=aggregates.percentage(completed, total_payments),
    )


def payment_chart(records: Sequence[Record]) -> ChartSeries:
    """Payments per status."""
    return aggregates.series(aggregates.group_count(records, "status", keys=PAYMENT_STATUSES))


PAYMENT_SCHEMA = EntitySchema(
    name="payment",
    title="Payment",
    command_name="payments",
    fields=(
        Field("transaction_id", "Transaction ID", computed=True),
        Field(
            "payer_name",
            "Payer",
            rules=(
                required("Payer name is required"),
                matches(
                    r"[A-Z][A-Z\s]*",
                    "Name must start with a capital letter and contain only letters/spaces",
                ),
            ),
            normalizers=(upper,),
        ),
        Field(
            "amount",
            "Amount",
            FieldKind.DECIMAL,
            rules=(
                required("Amount must be greater than 0"),
                positive_number("Amount must be greater than 0"),
            ),
        ),
        Field(
            "payment_method",
            "Method",
            rules=(
                required("Payment method is required"),
                one_of(PAYMENT_METHODS, "Payment method is required"),
            ),
            choices=PAYMENT_METHODS,
        ),
        Field(
            "status",
            "Status",
            rules=(required("Status is required"), one_of(PAYMENT_STATUSES, "Status is required")),
            choices=PAYMENT_STATUSES,
        ),
        Field("description", "Description", normalizers=(upper,)),
        Field("payer_email", "Email", rules=(email("Invalid email"),), normalizers=(upper,)),
        Field("payer_phone", "Phone", rules=(fixed_digits(10, "Phone must be 10 digits"),)),
        Field("reference_number", "Reference", normalizers=(upper,)),
        Field("date", "Date", FieldKind.DATE, computed=True),
    ),
    compute=compute_transaction_fields,
    statistics=payment_statistics,
    chart=payment_chart,
    search_fields=("transaction_id", "payer_name", "status"),
    list_fields=("transaction_id", "payer_name", "amount", "payment_method", "status", "date"),
)
