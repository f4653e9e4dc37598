"""Validates raw parsed JSON against the transaction schema."""

import re
from datetime import date
from decimal import Decimal
from typing import Any

from statement_scanner.extraction.exceptions import ExtractionValidationError
from statement_scanner.extraction.models import Transaction

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_REQUIRED_FIELDS = ("date", "description", "category", "amount")


def validate_and_build(data: dict[str, Any]) -> list[Transaction]:
    """Validate raw parsed JSON and build the list of transactions.

    Raises:
        ExtractionValidationError: on any validation failure.
    """
    if "transactions" not in data:
        raise ExtractionValidationError("Missing required top-level field: transactions")
    raw = data["transactions"]
    if not isinstance(raw, list):
        raise ExtractionValidationError("'transactions' must be a list")
    return [_build_transaction(item, i) for i, item in enumerate(raw)]


def _build_transaction(raw: Any, index: int) -> Transaction:
    if not isinstance(raw, dict):
        raise ExtractionValidationError(f"Transaction at index {index} must be an object")
    for field in _REQUIRED_FIELDS:
        if raw.get(field) is None:
            raise ExtractionValidationError(
                f"Transaction at index {index}: missing required field '{field}'"
            )
    return Transaction(
        date=_build_date(raw["date"], index),
        description=_build_text(raw["description"], "description", index),
        category=_build_text(raw["category"], "category", index),
        amount=_build_amount(raw["amount"], index),
    )


def _build_date(raw: Any, index: int) -> str:
    if not isinstance(raw, str) or not _ISO_DATE_RE.fullmatch(raw):
        raise ExtractionValidationError(
            f"Transaction at index {index}: 'date' must be a YYYY-MM-DD string, got {raw!r}"
        )
    try:
        date.fromisoformat(raw)
    except ValueError as exc:
        raise ExtractionValidationError(
            f"Transaction at index {index}: 'date' is not a calendar date: {raw}"
        ) from exc
    return raw


def _build_text(raw: Any, field: str, index: int) -> str:
    if not isinstance(raw, str):
        raise ExtractionValidationError(
            f"Transaction at index {index}: '{field}' must be a string"
        )
    return raw


def _build_amount(raw: Any, index: int) -> Decimal:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float, Decimal)):
        raise ExtractionValidationError(
            f"Transaction at index {index}: 'amount' must be a number"
        )
    amount = Decimal(str(raw)) if isinstance(raw, float) else Decimal(raw)
    if not amount.is_finite():
        raise ExtractionValidationError(
            f"Transaction at index {index}: 'amount' must be finite"
        )
    return amount
