from typing import ClassVar

from statement_scanner.config.settings import Settings
from statement_scanner.extraction.base import BaseExtractor
from statement_scanner.extraction.example_client_adapter import ExampleClientAdapter
from statement_scanner.extraction.extractor import Extractor
from statement_scanner.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the configured extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return Extractor(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_output_tokens=settings.extraction_max_output_tokens,
            )
        client = OpenAIClientAdapter(
            api_key=settings.extraction_api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Extractor(
            client=client,
            model=settings.extraction_model_name,
            temperature=settings.extraction_temperature,
            max_output_tokens=settings.extraction_max_output_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.extraction_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "extraction_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )
