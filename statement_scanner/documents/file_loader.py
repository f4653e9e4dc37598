import mimetypes
from pathlib import Path

from statement_scanner.documents.models import LocalDocument

_EXTRA_MEDIA_TYPES = {
    ".heic": "image/heic",
    ".webp": "image/webp",
}


def guess_media_type(path: Path) -> str:
    """Guess a document's media type from its file extension."""
    suffix = path.suffix.lower()
    if suffix in _EXTRA_MEDIA_TYPES:
        return _EXTRA_MEDIA_TYPES[suffix]
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"


class FileLoader:
    """Builds document handles for files on disk."""

    def load(self, path: Path) -> LocalDocument:
        """Stat a file and wrap it as a LocalDocument.

        Raises:
            FileNotFoundError: if the path does not point to a file.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return LocalDocument(
            path=path,
            size=path.stat().st_size,
            media_type=guess_media_type(path),
        )

    def load_many(self, paths: list[Path]) -> list[LocalDocument]:
        return [self.load(path) for path in paths]
