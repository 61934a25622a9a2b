"""Audit logging package."""

from invoice_editor.audit.logger import AuditLogger, configure_logging
from invoice_editor.audit.sink import AuditSinkInterface, InMemoryAuditSink

__all__ = [
    "AuditLogger",
    "AuditSinkInterface",
    "InMemoryAuditSink",
    "configure_logging",
]
