"""
JSON Document Store

Reads and writes invoice documents as pretty-printed UTF-8 JSON.

File format:
    {
      "date": "2024-01-05T00:00:00",
      "invoiceNumber": 12,
      "consultant": "...",
      "client": "...",
      "filename": "invoice_$INV",
      "services": "...",
      "sessions": [
        {
          "start": "2024-01-05T09:00:00",
          "finish": "2024-01-05T11:00:00"
        }
      ],
      "rate": 50.0,
      "taxRate": 10.0
    }

Derived totals are never written. Dates and numbers go through the
field codecs in ``invoice_editor.models.codec``.
"""

from pathlib import Path

import structlog
from pydantic import ValidationError

from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.services.persistence.files import atomic_write_bytes
from invoice_editor.services.persistence.interface import (
    DocumentStoreInterface,
    FormatError,
    InvalidTypeError,
    NotFoundError,
    PathLike,
)

logger = structlog.get_logger(__name__)

INDENT = 2
ENCODING = "utf-8"


def dumps(document: InvoiceDocument) -> str:
    """Serialize every persisted field of ``document`` to JSON text."""
    return document.model_dump_json(by_alias=True, indent=INDENT)


def loads(text: str) -> InvoiceDocument:
    """
    Parse JSON text into a document.

    Raises:
        FormatError: On malformed JSON, unparsable dates or type mismatches
    """
    try:
        return InvoiceDocument.model_validate_json(text)
    except ValidationError as e:
        raise FormatError(f"Invalid invoice document: {e}") from e


class JsonDocumentStore(DocumentStoreInterface):
    """
    File-backed JSON store.

    Load requires the configured extension (case-insensitive); save
    writes wherever it is told to.
    """

    def __init__(self, extension: str = ".json"):
        self._extension = extension.lower()

    @property
    def extension(self) -> str:
        return self._extension

    def load(self, path: PathLike) -> InvoiceDocument:
        path = Path(path)

        if not path.is_file():
            raise NotFoundError(f"File was not found: {path}")

        if path.suffix.lower() != self._extension:
            raise InvalidTypeError(
                f"Invalid file type: expected {self._extension}, got {path.suffix or 'no extension'}"
            )

        try:
            text = path.read_text(encoding=ENCODING)
        except UnicodeDecodeError as e:
            raise FormatError(f"Document is not valid {ENCODING}: {path}") from e

        document = loads(text)
        logger.debug("document_read", path=str(path), sessions=len(document.sessions))
        return document

    def save(self, document: InvoiceDocument, path: PathLike) -> Path:
        path = Path(path)
        payload = dumps(document).encode(ENCODING)
        atomic_write_bytes(path, payload)
        logger.debug("document_written", path=str(path), size=len(payload))
        return path
