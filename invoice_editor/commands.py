"""
Editor Commands

Explicit command objects the presentation layer invokes when the user
changes something. Each command mutates the editor's live document and
marks it dirty; the core never subscribes to UI events.

Usage:
    SetField(name="rate", value=75.0).execute(editor)
    AddSession().execute(editor)
    SetSessionFinish(index=0, value=datetime(2024, 1, 5, 17)).execute(editor)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from invoice_editor.editor import InvoiceEditor
from invoice_editor.models.invoice import InvoiceDocument


class EditorCommand(BaseModel, ABC):
    """A single user edit."""
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def apply(self, document: InvoiceDocument) -> None:
        """Mutate the document."""
        pass

    def execute(self, editor: InvoiceEditor) -> None:
        """Apply to the editor's document, then mark the editor dirty."""
        self.apply(editor.require_document())
        editor.set_dirty()


class SetField(EditorCommand):
    """
    Assign one of the invoice's editable fields.

    The value goes through the model's validation, so an invalid value
    raises ``ValueError`` and leaves the document untouched.
    """

    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "date",
        "invoice_number",
        "consultant",
        "client",
        "filename",
        "services",
        "rate",
        "tax_rate",
    })

    name: str
    value: Any

    def apply(self, document: InvoiceDocument) -> None:
        if self.name not in self.EDITABLE_FIELDS:
            raise ValueError(f"Field is not editable: {self.name}")
        setattr(document, self.name, self.value)


class IncrementInvoiceNumber(EditorCommand):
    def apply(self, document: InvoiceDocument) -> None:
        document.increment_invoice_number()


class AddSession(EditorCommand):
    def apply(self, document: InvoiceDocument) -> None:
        document.add_session()


class RemoveSession(EditorCommand):
    index: int

    def apply(self, document: InvoiceDocument) -> None:
        document.remove_session(self.index)


class SetSessionStart(EditorCommand):
    index: int
    value: datetime

    def apply(self, document: InvoiceDocument) -> None:
        document.sessions[self.index].start = self.value


class SetSessionFinish(EditorCommand):
    index: int
    value: datetime

    def apply(self, document: InvoiceDocument) -> None:
        document.sessions[self.index].finish = self.value
