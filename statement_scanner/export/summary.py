"""Totals shown alongside an extracted transaction table."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from statement_scanner.export.table_serializer import format_amount
from statement_scanner.extraction.models import Transaction


@dataclass(frozen=True)
class TransactionSummary:
    count: int
    total_income: Decimal
    total_spending: Decimal

    def describe(self) -> str:
        return (
            f"{self.count} rows extracted, "
            f"income {format_amount(self.total_income)}, "
            f"spending {format_amount(self.total_spending)}"
        )


def summarize(transactions: Sequence[Transaction]) -> TransactionSummary:
    """Count transactions and total credits and debits.

    Spending is reported as a positive sum of the negative amounts.
    """
    income = sum((t.amount for t in transactions if t.amount > 0), Decimal(0))
    spending = sum((-t.amount for t in transactions if t.amount < 0), Decimal(0))
    return TransactionSummary(
        count=len(transactions),
        total_income=income,
        total_spending=spending,
    )
