import base64
import binascii

from statement_scanner.documents.exceptions import ReadError
from statement_scanner.documents.models import BaseDocument, EncodedDocument, InMemoryDocument


def strip_data_url_prefix(value: str) -> str:
    """Drop a ``data:<type>;base64,`` envelope, leaving only the encoded content."""
    if value.startswith("data:"):
        _, sep, content = value.partition(",")
        if sep:
            return content
    return value


def document_from_data_url(name: str, data_url: str) -> InMemoryDocument:
    """Build a document from a browser-style ``data:`` URL upload.

    Entry point for web front ends that hand over uploads the way
    ``FileReader.readAsDataURL`` produces them; the CLI reads local files instead.

    Raises:
        ReadError: if the URL is not base64 data or the content does not decode.
    """
    header, sep, _ = data_url.partition(",")
    if not data_url.startswith("data:") or not sep or not header.endswith(";base64"):
        raise ReadError(f"{name}: not a base64 data URL")
    media_type = header[len("data:"):-len(";base64")]
    try:
        content = base64.b64decode(strip_data_url_prefix(data_url), validate=True)
    except binascii.Error as exc:
        raise ReadError(f"{name}: invalid base64 content: {exc}") from exc
    return InMemoryDocument(name=name, content=content, media_type=media_type)


class DocumentEncoder:
    """Reads a document handle and encodes its bytes as base64 text."""

    async def encode(self, document: BaseDocument) -> EncodedDocument:
        """Read and encode a document.

        Returns:
            EncodedDocument with the bare base64 payload (no data URL header)
            and the document's declared media type.

        Raises:
            ReadError: if the underlying read fails.
        """
        try:
            raw_bytes = await document.read()
        except ReadError:
            raise
        except OSError as exc:
            raise ReadError(f"Failed to read {document.name}: {exc}") from exc
        payload = base64.b64encode(raw_bytes).decode("ascii")
        return EncodedDocument(payload=payload, media_type=document.media_type)
