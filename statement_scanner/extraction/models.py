from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A single financial event extracted from a document."""

    date: str
    description: str
    category: str
    amount: Decimal

    @property
    def calendar_date(self) -> date:
        return date.fromisoformat(self.date)
