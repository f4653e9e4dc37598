import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from statement_scanner.documents.exceptions import ReadError


class BaseDocument(ABC):
    """Contract for a submitted document handle."""

    name: str
    size: int
    media_type: str

    @abstractmethod
    async def read(self) -> bytes:
        """Return the raw document bytes.

        Raises:
            ReadError: if the bytes cannot be obtained.
        """

    @property
    def dedup_key(self) -> tuple[str, int]:
        return (self.name, self.size)


class InMemoryDocument(BaseDocument):
    """Document whose bytes are already held in memory."""

    def __init__(self, name: str, content: bytes, media_type: str) -> None:
        self.name = name
        self.size = len(content)
        self.media_type = media_type
        self._content = content

    async def read(self) -> bytes:
        return self._content

    def __repr__(self) -> str:
        return f"InMemoryDocument(name={self.name!r}, size={self.size}, media_type={self.media_type!r})"


class LocalDocument(BaseDocument):
    """Document backed by a file on the local filesystem."""

    def __init__(self, path: Path, size: int, media_type: str) -> None:
        self.path = path
        self.name = path.name
        self.size = size
        self.media_type = media_type

    async def read(self) -> bytes:
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as exc:
            raise ReadError(f"Failed to read {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"LocalDocument(path={str(self.path)!r}, size={self.size}, media_type={self.media_type!r})"


@dataclass(frozen=True)
class EncodedDocument:
    """Transport-safe document payload."""

    payload: str
    media_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.payload}"
