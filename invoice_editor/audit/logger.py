"""
Audit Logger

DESIGN DECISION: Every editor operation is logged.
This provides:
1. Complete traceability of loads, saves and exports
2. Debugging capability when a file cannot be read or written
3. A history the user can look at

The audit logger:
- Is synchronous, like the rest of the editor
- Gracefully handles sink failures (never breaks an editor operation)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from invoice_editor.audit.sink import AuditSinkInterface
from invoice_editor.config import EditorSettings, get_settings
from invoice_editor.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


def configure_logging(settings: Optional[EditorSettings] = None) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Call once at startup; calling again replaces the configuration.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The audit sink, when one is configured
    """

    def __init__(self, sink: Optional[AuditSinkInterface] = None):
        """
        Initialize audit logger.

        Args:
            sink: Where events are recorded.
                  If None, only logs locally.
        """
        self._sink = sink
        self._logger = structlog.get_logger("invoice_editor.audit")

    @property
    def sink(self) -> Optional[AuditSinkInterface]:
        return self._sink

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Records to the sink if available.

        Returns True if the sink write succeeded (or no sink configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._sink:
            try:
                return self._sink.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_document_created(self) -> None:
        self.log(AuditEventBuilder.document_created())

    def log_document_loaded(self, path: Path, session_count: int) -> None:
        self.log(AuditEventBuilder.document_loaded(path, session_count))

    def log_document_modified(self, path: Optional[Path]) -> None:
        self.log(AuditEventBuilder.document_modified(path))

    def log_document_saved(self, path: Path) -> None:
        self.log(AuditEventBuilder.document_saved(path))

    def log_invoice_exported(
        self,
        template_path: Path,
        out_path: Path,
        document_path: Optional[Path],
        total: float,
    ) -> None:
        """Log a successful export."""
        self.log(AuditEventBuilder.invoice_exported(
            template_path=template_path,
            out_path=out_path,
            document_path=document_path,
            total=total,
        ))

    def log_failure(
        self,
        event_type: AuditEventType,
        path: Optional[Path],
        error: Exception,
    ) -> None:
        """Log a failed load, save or export."""
        self.log(AuditEventBuilder.operation_failed(event_type, path, error))
