"""
Persistence Services Package

Provides the abstract document store and its JSON file implementation.
"""

from invoice_editor.services.persistence.interface import (
    DocumentStoreInterface,
    FormatError,
    InvalidTypeError,
    NotFoundError,
    PersistenceError,
)
from invoice_editor.services.persistence.files import atomic_write_bytes
from invoice_editor.services.persistence.store import (
    JsonDocumentStore,
    dumps,
    loads,
)

__all__ = [
    # Interface
    "DocumentStoreInterface",
    # Exceptions
    "FormatError",
    "InvalidTypeError",
    "NotFoundError",
    "PersistenceError",
    # JSON implementation
    "JsonDocumentStore",
    "atomic_write_bytes",
    "dumps",
    "loads",
]
