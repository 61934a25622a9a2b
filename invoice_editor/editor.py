"""
Invoice Editor Orchestrator

This module ties the components together and owns the single live
invoice document:
1. New / Load / Save / Save As (document ↔ JSON file)
2. Export (document + template → .docx invoice)
3. Dirty tracking for the presentation layer

DESIGN DECISION: The editor is passed explicitly to whatever needs it.
There is no process-wide instance. The presentation layer reports
changes through ``set_dirty`` (directly or via ``invoice_editor.commands``).

State machine:
    NO_DOCUMENT --new/load--> CLEAN --set_dirty--> DIRTY
    DIRTY --save/save_as/load/new--> CLEAN
Failed operations leave the state untouched.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from invoice_editor.audit import AuditLogger, configure_logging
from invoice_editor.config import EditorSettings, get_settings
from invoice_editor.models.audit import AuditEventType
from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.services.export import TemplateError, TemplateExporter
from invoice_editor.services.persistence import (
    DocumentStoreInterface,
    JsonDocumentStore,
)

PathLike = Union[str, Path]


class EditorState(str, Enum):
    NO_DOCUMENT = "no_document"
    CLEAN = "clean"
    DIRTY = "dirty"


class EditorError(Exception):
    """Base exception for editor operations."""
    pass


class NoPathError(EditorError):
    """Save was requested but the document has never been given a file."""
    pass


class NoDocumentError(EditorError):
    """The operation needs an open document."""
    pass


class InvoiceEditor:
    """
    Orchestrates the lifecycle of one invoice document.

    Collaborators are injected; defaults are built from settings.
    """

    def __init__(
        self,
        document: Optional[InvoiceDocument] = None,
        document_path: Optional[PathLike] = None,
        store: Optional[DocumentStoreInterface] = None,
        exporter: Optional[TemplateExporter] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[EditorSettings] = None,
    ):
        self._settings = settings or get_settings()
        self._store = store or JsonDocumentStore(
            extension=self._settings.document_extension,
        )
        self._exporter = exporter or TemplateExporter(
            member=self._settings.template_member,
            currency_symbol=self._settings.currency_symbol,
        )
        self._audit_logger = audit_logger or AuditLogger()

        self._document = document
        self._document_path = Path(document_path) if document_path else None
        self._dirty = False

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def document(self) -> Optional[InvoiceDocument]:
        return self._document

    @property
    def document_path(self) -> Optional[Path]:
        return self._document_path

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def state(self) -> EditorState:
        if self._document is None:
            return EditorState.NO_DOCUMENT
        return EditorState.DIRTY if self._dirty else EditorState.CLEAN

    def require_document(self) -> InvoiceDocument:
        if self._document is None:
            raise NoDocumentError("No document is currently open")
        return self._document

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def new_document(self) -> InvoiceDocument:
        """Replace the live document with a fresh, never-saved one."""
        self._document = InvoiceDocument()
        self._document_path = None
        self._dirty = False
        self._audit_logger.log_document_created()
        return self._document

    def load(self, path: PathLike) -> InvoiceDocument:
        """
        Open a document file.

        On failure the current document, path and dirty flag are kept
        and the error propagates.

        Raises:
            NotFoundError, InvalidTypeError, FormatError
        """
        path = Path(path)
        try:
            document = self._store.load(path)
        except Exception as e:
            self._audit_logger.log_failure(AuditEventType.DOCUMENT_LOAD_FAILED, path, e)
            raise

        self._document = document
        self._document_path = path
        self._dirty = False
        self._audit_logger.log_document_loaded(path, len(document.sessions))
        return document

    def set_dirty(self) -> None:
        """Record that the document changed since the last load or save."""
        self.require_document()
        if not self._dirty:
            self._dirty = True
            self._audit_logger.log_document_modified(self._document_path)

    def save(self) -> Path:
        """
        Save to the current document path.

        Raises:
            NoPathError: If the document has never been saved
        """
        if self._document_path is None:
            raise NoPathError("No filename was specified")
        return self.save_as(self._document_path)

    def save_as(self, path: PathLike) -> Path:
        """
        Save to ``path`` and make it the current document path.

        The path and dirty flag only change once the write succeeded.
        """
        if not path:
            raise NoPathError("No filename was specified")
        document = self.require_document()
        path = Path(path)

        try:
            self._store.save(document, path)
        except Exception as e:
            self._audit_logger.log_failure(AuditEventType.DOCUMENT_SAVE_FAILED, path, e)
            raise

        self._document_path = path
        self._dirty = False
        self._audit_logger.log_document_saved(path)
        return path

    def export(
        self,
        template_path: Optional[PathLike],
        out_path: PathLike,
    ) -> Path:
        """
        Fill the template with the live document and write ``out_path``.

        ``template_path`` falls back to the configured template. Export
        is a side artifact: the path and dirty flag are not touched.

        Raises:
            NoDataError: If the document has no sessions
            TemplateError: If no usable template is available
        """
        document = self.require_document()
        out_path = Path(out_path)

        try:
            template = template_path or self._settings.template_path
            if template is None:
                raise TemplateError("No template was specified or configured")
            written = self._exporter.export(document, template, out_path)
        except Exception as e:
            self._audit_logger.log_failure(
                AuditEventType.INVOICE_EXPORT_FAILED, self._document_path, e
            )
            raise

        self._audit_logger.log_invoice_exported(
            template_path=Path(template),
            out_path=written,
            document_path=self._document_path,
            total=document.total,
        )
        return written

    def suggested_export_filename(self) -> str:
        """Default export file name: the expanded filename plus the export extension."""
        document = self.require_document()
        return f"{document.resolve_filename()}{self._settings.export_extension}"


def create_editor(
    settings: Optional[EditorSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> InvoiceEditor:
    """
    Factory for the presentation layer.

    Configures logging and returns an editor holding a new document.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    editor = InvoiceEditor(settings=settings, audit_logger=audit_logger)
    editor.new_document()
    return editor
