"""Tab-separated rendering of transactions for spreadsheet paste."""

import re
from collections.abc import Sequence
from decimal import Decimal

from statement_scanner.extraction.models import Transaction

HEADERS = ("Date", "Description", "Category", "Amount")
FIELD_DELIMITER = "\t"
ROW_DELIMITER = "\n"

_BREAKING_CHARS_RE = re.compile(r"[\t\n\r]+")


def sanitize_field(value: str) -> str:
    """Collapse tab/newline runs to a single space and trim."""
    return _BREAKING_CHARS_RE.sub(" ", value).strip()


def format_amount(amount: Decimal) -> str:
    """Render an amount as a plain signed decimal: ``2500.00`` -> ``2500``, ``-4.50`` -> ``-4.5``."""
    if amount == 0:
        return "0"
    return f"{amount.normalize():f}"


def serialize(transactions: Sequence[Transaction]) -> str:
    """Render transactions as a header row plus one tab-separated row each.

    Returns an empty string for no transactions.
    """
    if not transactions:
        return ""
    rows = [FIELD_DELIMITER.join(HEADERS)]
    for t in transactions:
        rows.append(
            FIELD_DELIMITER.join((
                t.date,
                sanitize_field(t.description),
                sanitize_field(t.category),
                format_amount(t.amount),
            ))
        )
    return ROW_DELIMITER.join(rows)
