"""
Abstract Document Store Interface

DESIGN DECISION: The editor talks to an abstract store.
This allows us to:
1. Keep the JSON file format in one place
2. Use a fake store in tests
3. Add another file format later without touching the editor
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from invoice_editor.models.invoice import InvoiceDocument

PathLike = Union[str, Path]


class DocumentStoreInterface(ABC):
    """
    Abstract interface for reading and writing invoice documents.
    """

    @abstractmethod
    def load(self, path: PathLike) -> InvoiceDocument:
        """
        Read a document from disk.

        Args:
            path: Location of the document file

        Returns:
            The decoded document

        Raises:
            NotFoundError: If the file does not exist
            InvalidTypeError: If the file has the wrong extension
            FormatError: If the content cannot be decoded
        """
        pass

    @abstractmethod
    def save(self, document: InvoiceDocument, path: PathLike) -> Path:
        """
        Write a document to disk.

        The destination is only touched once the full payload is built.

        Args:
            document: The document to write
            path: Destination file

        Returns:
            The path written
        """
        pass


class PersistenceError(Exception):
    """Base exception for document persistence."""
    pass


class NotFoundError(PersistenceError):
    """Document file does not exist."""
    pass


class InvalidTypeError(PersistenceError):
    """File is not a document file (wrong extension)."""
    pass


class FormatError(PersistenceError):
    """Document content could not be decoded."""
    pass
