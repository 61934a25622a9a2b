"""
Audit Models for the Invoice Editor

Every editor operation (new, load, save, export) is recorded as an
audit event. This provides:
1. Traceability of what was written where
2. Debugging information when a load or export fails
3. A history the presentation layer can show

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every editor operation has a success and a failure event.
    """
    # Document lifecycle
    DOCUMENT_CREATED = "document_created"
    DOCUMENT_LOADED = "document_loaded"
    DOCUMENT_LOAD_FAILED = "document_load_failed"
    DOCUMENT_MODIFIED = "document_modified"

    # Persistence
    DOCUMENT_SAVED = "document_saved"
    DOCUMENT_SAVE_FAILED = "document_save_failed"

    # Export
    INVOICE_EXPORTED = "invoice_exported"
    INVOICE_EXPORT_FAILED = "invoice_export_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


PathLike = Union[str, Path]


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    Every editor operation creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which file the event concerns, if any
    document_path: Optional[str] = Field(
        default=None,
        description="Document file involved in the operation"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "document_path": self.document_path,
            "description": self.description,
            "details": self.details,
            "error_type": self.error_type,
            "error_message": self.error_message,
        }


def _path_str(path: Optional[PathLike]) -> Optional[str]:
    return str(path) if path is not None else None


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.document_loaded(path)
        event = AuditEventBuilder.operation_failed(AuditEventType.DOCUMENT_SAVE_FAILED, path, exc)
    """

    @staticmethod
    def document_created() -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DOCUMENT_CREATED,
            description="New invoice document created",
        )

    @staticmethod
    def document_loaded(path: PathLike, session_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DOCUMENT_LOADED,
            document_path=_path_str(path),
            description=f"Invoice document loaded: {Path(path).name}",
            details={"session_count": session_count},
        )

    @staticmethod
    def document_modified(path: Optional[PathLike]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DOCUMENT_MODIFIED,
            severity=AuditSeverity.DEBUG,
            document_path=_path_str(path),
            description="Invoice document has unsaved changes",
        )

    @staticmethod
    def document_saved(path: PathLike) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DOCUMENT_SAVED,
            document_path=_path_str(path),
            description=f"Invoice document saved: {Path(path).name}",
        )

    @staticmethod
    def invoice_exported(
        template_path: PathLike,
        out_path: PathLike,
        document_path: Optional[PathLike],
        total: float,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVOICE_EXPORTED,
            document_path=_path_str(document_path),
            description=f"Invoice exported: {Path(out_path).name}",
            details={
                "template_path": str(template_path),
                "out_path": str(out_path),
                "total": total,
            },
        )

    @staticmethod
    def operation_failed(
        event_type: AuditEventType,
        path: Optional[PathLike],
        error: Exception,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.ERROR,
            document_path=_path_str(path),
            description=f"{event_type.value.replace('_', ' ').capitalize()}",
            error_type=type(error).__name__,
            error_message=str(error),
        )
