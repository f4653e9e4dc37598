from collections.abc import Iterable, Iterator

from statement_scanner.documents.models import BaseDocument
from statement_scanner.logging.logger import Log

ALLOWED_MEDIA_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/heic",
    "application/pdf",
})


class SubmissionSet:
    """Ordered set of documents selected for analysis.

    Documents are de-duplicated by (name, size); unsupported media types
    are dropped on add.
    """

    def __init__(self) -> None:
        self._documents: list[BaseDocument] = []

    def add(self, documents: Iterable[BaseDocument]) -> list[BaseDocument]:
        """Add documents, returning the ones actually accepted."""
        seen = {d.dedup_key for d in self._documents}
        added: list[BaseDocument] = []
        for document in documents:
            if document.media_type not in ALLOWED_MEDIA_TYPES:
                Log.debug(f"Skipping {document.name}: unsupported type {document.media_type}")
                continue
            if document.dedup_key in seen:
                Log.debug(f"Skipping {document.name}: already selected")
                continue
            seen.add(document.dedup_key)
            self._documents.append(document)
            added.append(document)
        return added

    def remove(self, index: int) -> BaseDocument:
        return self._documents.pop(index)

    def clear(self) -> None:
        self._documents.clear()

    def snapshot(self) -> tuple[BaseDocument, ...]:
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[BaseDocument]:
        return iter(self.snapshot())
