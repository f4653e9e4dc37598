import json
from pathlib import Path

from statement_scanner.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
REQUIRED_PLACEHOLDERS = ("{current_year}", "{json_schema}")


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template with ``{current_year}`` and ``{json_schema}`` placeholders.

    Raises:
        ExtractionError: if the file cannot be read or a placeholder is missing.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc
    missing = [p for p in REQUIRED_PLACEHOLDERS if p not in template]
    if missing:
        raise ExtractionError(f"Prompt template {path.name} is missing placeholders: {missing}")
    return template


def load_json_schema(path: Path | None = None) -> str:
    """Load the transaction response schema.

    The schema must be a JSON object whose ``transactions`` property is the
    array of items sent back by the provider.

    Raises:
        ExtractionError: if the file cannot be read or is not such a schema.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_schema.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load JSON schema: {exc}") from exc
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Invalid JSON schema in {path.name}: {exc}") from exc
    if not isinstance(schema, dict) or "transactions" not in schema.get("properties", {}):
        raise ExtractionError(f"JSON schema {path.name} does not describe 'transactions'")
    return raw
