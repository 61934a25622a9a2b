"""Shared fixtures: settings isolated from the environment, documents and templates."""

import zipfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from invoice_editor.audit import AuditLogger, InMemoryAuditSink
from invoice_editor.config import EditorSettings
from invoice_editor.models.invoice import InvoiceDocument, Session

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>"
    "<w:p><w:r><w:t>Invoice [INVOICE] dated [DATE]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>[CONSULTANT]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>[CLIENT]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>[SERVICE]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Subtotal [SUBTOT] Tax [TAX]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Total [TOTAL]</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Amount due: [TOTAL]</w:t></w:r></w:p>"
    "</w:body>"
    "</w:document>"
)

CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>'
)

STYLES_XML = '<?xml version="1.0" encoding="UTF-8"?><w:styles/>'


def write_template(path: Path, document_xml: str = DOCUMENT_XML, member: str = "word/document.xml") -> Path:
    """Create a minimal .docx-like archive."""
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", CONTENT_TYPES_XML)
        archive.writestr(member, document_xml)
        archive.writestr("word/styles.xml", STYLES_XML)
    return path


def read_member(path: Path, member: str = "word/document.xml") -> str:
    with zipfile.ZipFile(path) as archive:
        return archive.read(member).decode("utf-8")


@pytest.fixture
def settings(tmp_path) -> EditorSettings:
    return EditorSettings(
        _env_file=None,
        template_path=tmp_path / "template.docx",
    )


@pytest.fixture
def template_path(tmp_path) -> Path:
    return write_template(tmp_path / "template.docx")


@pytest.fixture
def audit_sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()


@pytest.fixture
def audit_logger(audit_sink) -> AuditLogger:
    return AuditLogger(audit_sink)


@pytest.fixture
def sample_document() -> InvoiceDocument:
    """Two sessions entered out of chronological order; 5 hours at 50/h plus 10% tax."""
    jan5 = datetime(2024, 1, 5, 9, 0, 0)
    jan1 = datetime(2024, 1, 1, 13, 30, 0)
    return InvoiceDocument(
        date=datetime(2024, 1, 31),
        invoice_number=42,
        consultant="Ada Lovelace\nAnalytical Engines Ltd.",
        client="Babbage & Co.",
        filename="invoice_$INV_$DATE",
        services="Engine design review",
        sessions=[
            Session(start=jan5, finish=jan5 + timedelta(hours=2)),
            Session(start=jan1, finish=jan1 + timedelta(hours=3)),
        ],
        rate=50.0,
        tax_rate=10.0,
    )
