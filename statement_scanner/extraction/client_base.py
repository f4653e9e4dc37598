from abc import ABC, abstractmethod

from statement_scanner.documents.models import EncodedDocument


class BaseExtractionClient(ABC):
    """Contract for provider-specific document-understanding AI clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
        max_output_tokens: int,
    ) -> str:
        """Return provider response as plain text."""
