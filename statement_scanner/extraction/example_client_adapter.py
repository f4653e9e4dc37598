"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from statement_scanner.documents.models import EncodedDocument
from statement_scanner.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed valid extraction JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {"transactions": []}

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

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
        _ = model, temperature, prompt, document, json_schema, max_output_tokens
        return json.dumps(self._response)
