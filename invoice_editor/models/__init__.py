"""
Data Models Package

This package contains all Pydantic models used by the Invoice Editor,
and the field codecs that control how they are written to disk.
"""

from invoice_editor.models.codec import (
    LocalDateTime,
    RoundTripFloat,
    decode_datetime,
    decode_float,
    encode_datetime,
    encode_float,
)
from invoice_editor.models.invoice import (
    InvoiceDocument,
    Session,
    ValidationIssue,
)
from invoice_editor.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Codecs
    "LocalDateTime",
    "RoundTripFloat",
    "decode_datetime",
    "decode_float",
    "encode_datetime",
    "encode_float",
    # Invoice models
    "InvoiceDocument",
    "Session",
    "ValidationIssue",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
