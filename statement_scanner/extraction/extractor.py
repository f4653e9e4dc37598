"""AI-powered transaction extractor."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

from statement_scanner.documents.models import EncodedDocument
from statement_scanner.extraction.base import BaseExtractor
from statement_scanner.extraction.client_base import BaseExtractionClient
from statement_scanner.extraction.exceptions import ExtractionError
from statement_scanner.extraction.models import Transaction
from statement_scanner.extraction.prompt_loader import load_json_schema, load_prompt_template
from statement_scanner.extraction.validator import validate_and_build
from statement_scanner.logging.logger import Log


class Extractor(BaseExtractor):
    """Extracts transactions from scanned statements using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        max_output_tokens: int = 8192,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_output_tokens = max_output_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def extract(self, payload: str, media_type: str) -> list[Transaction]:
        """Send one document to the AI provider and validate its answer."""
        prompt = self._build_prompt()
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = await self._call_ai(prompt, EncodedDocument(payload, media_type))
        Log.debug(f"AI raw response:\n{Log.excerpt(raw_response)}")

        parsed = self._parse_json(raw_response)
        transactions = validate_and_build(parsed)

        Log.info(f"Extraction complete: {len(transactions)} transactions extracted")
        return transactions

    def _build_prompt(self) -> str:
        return self._prompt_template.format(
            current_year=date.today().year,
            json_schema=self._json_schema,
        )

    async def _call_ai(self, prompt: str, document: EncodedDocument) -> str:
        return await self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            prompt=prompt,
            document=document,
            json_schema=self._json_schema_dict,
            max_output_tokens=self._max_output_tokens,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if not cleaned:
            raise ExtractionError("No response received from AI provider")
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionError("JSON response must be an object")
        return parsed
