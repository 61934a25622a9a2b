"""Services package."""

from invoice_editor.services.export import (
    ExportError,
    NoDataError,
    TemplateError,
    TemplateExporter,
)
from invoice_editor.services.persistence import (
    DocumentStoreInterface,
    FormatError,
    InvalidTypeError,
    JsonDocumentStore,
    NotFoundError,
    PersistenceError,
)

__all__ = [
    # Export services
    "ExportError",
    "NoDataError",
    "TemplateError",
    "TemplateExporter",
    # Persistence services
    "DocumentStoreInterface",
    "FormatError",
    "InvalidTypeError",
    "JsonDocumentStore",
    "NotFoundError",
    "PersistenceError",
]
