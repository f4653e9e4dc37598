from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "openai"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o"
    extraction_base_url: str = ""
    extraction_timeout_seconds: int = 120
    extraction_temperature: float = 0.0
    extraction_max_output_tokens: int = 8192
