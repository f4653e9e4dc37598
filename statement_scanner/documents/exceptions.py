class DocumentError(Exception):
    """Base exception for all document-related errors."""


class ReadError(DocumentError):
    """Raised when a document's bytes cannot be obtained."""
