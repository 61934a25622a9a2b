"""
Audit Sink Interface

DESIGN DECISION: The audit logger writes to an abstract sink.
This allows us to:
1. Keep a history in memory for the presentation layer
2. Inspect recorded events in tests
3. Add a persistent sink later without touching the editor
"""

from abc import ABC, abstractmethod

from invoice_editor.models.audit import AuditEvent, AuditEventType


class AuditSinkInterface(ABC):
    """
    Abstract interface for audit event storage.

    Audit events are append-only.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event.

        Args:
            event: The audit event to record

        Returns:
            True if recorded successfully
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Args:
            limit: Maximum number of events to return

        Returns:
            List of recent events (newest first)
        """
        pass


class InMemoryAuditSink(AuditSinkInterface):
    """Keeps events in a list for the lifetime of the editor."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def events_of_type(self, event_type: AuditEventType) -> list[AuditEvent]:
        """Events of one type, oldest first."""
        return [e for e in self._events if e.event_type == event_type]
