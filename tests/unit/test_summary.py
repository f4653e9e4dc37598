from decimal import Decimal

from statement_scanner.export.summary import TransactionSummary, summarize
from statement_scanner.extraction.models import Transaction


def _tx(amount: str, date: str = "2024-01-01") -> Transaction:
    return Transaction(date=date, description="Shop", category="Groceries", amount=Decimal(amount))


class TestSummarize:
    def test_empty_input(self) -> None:
        summary = summarize([])
        assert summary == TransactionSummary(
            count=0, total_income=Decimal(0), total_spending=Decimal(0)
        )

    def test_mixed_signs_split_into_income_and_spending(
        self, salary_transaction: Transaction, coffee_transaction: Transaction
    ) -> None:
        summary = summarize([salary_transaction, coffee_transaction, _tx("-10.25")])
        assert summary.count == 3
        assert summary.total_income == Decimal("2500.00")
        assert summary.total_spending == Decimal("14.75")

    def test_zero_amount_is_counted_but_not_totalled(self) -> None:
        summary = summarize([_tx("0"), _tx("12.30")])
        assert summary.count == 2
        assert summary.total_income == Decimal("12.30")
        assert summary.total_spending == Decimal(0)

    def test_sums_stay_exact(self) -> None:
        summary = summarize([_tx("0.10"), _tx("0.20")])
        assert summary.total_income == Decimal("0.30")


class TestDescribe:
    def test_uses_canonical_amounts(
        self, salary_transaction: Transaction, coffee_transaction: Transaction
    ) -> None:
        text = summarize([salary_transaction, coffee_transaction]).describe()
        assert text == "2 rows extracted, income 2500, spending 4.5"

    def test_empty_summary(self) -> None:
        assert summarize([]).describe() == "0 rows extracted, income 0, spending 0"
