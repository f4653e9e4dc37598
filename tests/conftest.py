import io
from decimal import Decimal

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from statement_scanner.extraction.models import Transaction


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page statement PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Date        Description      Amount")
    c.drawString(72, 700, "03/05       Coffee Shop      -4.50")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def coffee_transaction() -> Transaction:
    return Transaction(
        date="2024-03-05",
        description="Coffee Shop",
        category="Dining",
        amount=Decimal("-4.50"),
    )


@pytest.fixture()
def salary_transaction() -> Transaction:
    return Transaction(
        date="2024-01-10",
        description="Employer Inc",
        category="Salary",
        amount=Decimal("2500.00"),
    )
