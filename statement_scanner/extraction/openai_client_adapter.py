import httpx
import openai

from statement_scanner.documents.models import EncodedDocument
from statement_scanner.extraction.client_base import BaseExtractionClient
from statement_scanner.extraction.exceptions import ExtractionError, ExtractionNetworkError

PDF_MEDIA_TYPE = "application/pdf"


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_completion_tokens=max_output_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "transaction_extraction",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._document_part(document),
                            {"type": "text", "text": prompt},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise ExtractionError("AI returned empty response")
        return content

    @staticmethod
    def _document_part(document: EncodedDocument) -> dict[str, object]:
        if document.media_type == PDF_MEDIA_TYPE:
            return {
                "type": "file",
                "file": {"filename": "document.pdf", "file_data": document.data_url},
            }
        return {"type": "image_url", "image_url": {"url": document.data_url}}
