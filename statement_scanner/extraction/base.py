from abc import ABC, abstractmethod

from statement_scanner.extraction.models import Transaction


class BaseExtractor(ABC):
    """Contract for all transaction extractors."""

    @abstractmethod
    async def extract(self, payload: str, media_type: str) -> list[Transaction]:
        """Extract financial transactions from an encoded document.

        Args:
            payload: Base64-encoded document content without any data URL header.
            media_type: Declared media type of the document.

        Returns:
            Transactions in document order. Empty when the document has none.

        Raises:
            ExtractionError: on any failure.
        """
