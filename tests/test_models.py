"""
Tests for the Invoice Editor models

Test strategy:
1. Unit tests for the document model and its derived totals
2. Unit tests for the audit models
3. No file I/O here (see test_persistence / test_export)
"""

import pytest
from datetime import datetime, timedelta

from invoice_editor.models.invoice import InvoiceDocument, Session, ValidationIssue
from invoice_editor.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestSession:
    """Tests for the Session model."""

    def test_duration_hours(self):
        """Test whole and fractional durations."""
        start = datetime(2024, 1, 1, 9, 0, 0)
        assert Session(start=start, finish=start + timedelta(hours=2)).duration_hours == 2.0
        assert Session(start=start, finish=start + timedelta(minutes=90)).duration_hours == 1.5

    def test_negative_duration_is_allowed(self):
        """Test that a finish before the start yields negative hours."""
        start = datetime(2024, 1, 1, 9, 0, 0)
        session = Session(start=start, finish=start - timedelta(hours=1))
        assert session.duration_hours == -1.0

    def test_timestamps_truncated_to_seconds(self):
        """Test that microseconds are dropped."""
        session = Session(
            start=datetime(2024, 1, 1, 9, 0, 0, 999999),
            finish=datetime(2024, 1, 1, 10, 0, 0, 1),
        )
        assert session.start.microsecond == 0
        assert session.finish.microsecond == 0

    def test_assignment_is_validated(self):
        """Test that string assignment goes through the date decoder."""
        session = Session()
        session.start = "2024-03-01T08:15:00"
        assert session.start == datetime(2024, 3, 1, 8, 15, 0)

        with pytest.raises(ValueError):
            session.finish = "not a date"


class TestInvoiceTotals:
    """Tests for derived totals."""

    def test_totals(self, sample_document):
        """Test hours, subtotal, tax and total for the sample invoice."""
        assert sample_document.total_hours == 5.0
        assert sample_document.subtotal == 250.0
        assert sample_document.tax == 25.0
        assert sample_document.total == 275.0

    def test_empty_document_totals(self):
        """Test that a new document totals to zero."""
        document = InvoiceDocument()
        assert document.total_hours == 0.0
        assert document.total == 0.0

    def test_totals_follow_rate_and_tax_changes(self, sample_document):
        """Test that totals are recomputed, never cached."""
        sample_document.rate = 100.0
        assert sample_document.subtotal == 500.0

        sample_document.tax_rate = 20.0
        assert sample_document.tax == 100.0
        assert sample_document.total == 600.0

    def test_totals_follow_session_changes(self, sample_document):
        """Test that editing a session's finish changes the totals."""
        session = sample_document.sessions[0]
        session.finish = session.start + timedelta(hours=4)
        assert sample_document.total_hours == 7.0
        assert sample_document.subtotal == 350.0

    def test_no_rounding_in_model(self):
        """Test that fractional hours are kept exactly."""
        start = datetime(2024, 1, 1, 9, 0, 0)
        document = InvoiceDocument(
            sessions=[Session(start=start, finish=start + timedelta(minutes=20))],
            rate=10.0,
        )
        assert document.total_hours == pytest.approx(1 / 3)
        assert document.subtotal == pytest.approx(10 / 3)


class TestInvoiceEditing:
    """Tests for the editing helpers."""

    def test_defaults(self):
        """Test default field values."""
        document = InvoiceDocument()
        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        assert document.date == today
        assert document.invoice_number == 1
        assert document.consultant == ""
        assert document.sessions == []
        assert document.rate == 0.0
        assert document.tax_rate == 0.0

    def test_add_session_to_empty_document(self):
        """Test that the first session starts today at midnight."""
        document = InvoiceDocument()
        session = document.add_session()
        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        assert session.start == today
        assert session.finish == today
        assert document.sessions == [session]

    def test_add_session_continues_from_last_finish(self, sample_document):
        """Test that a new session starts where the last one finished."""
        last_finish = sample_document.sessions[-1].finish
        session = sample_document.add_session()
        assert session.start == last_finish
        assert session.finish == last_finish
        assert len(sample_document.sessions) == 3

    def test_remove_session(self, sample_document):
        """Test removal by index."""
        second = sample_document.sessions[1]
        removed = sample_document.remove_session(0)
        assert removed.start == datetime(2024, 1, 5, 9, 0, 0)
        assert sample_document.sessions == [second]

    def test_remove_session_bad_index(self, sample_document):
        """Test that a bad index raises IndexError."""
        with pytest.raises(IndexError):
            sample_document.remove_session(5)

    def test_sorted_sessions_leaves_order_untouched(self, sample_document):
        """Test that sorting returns a copy."""
        original = list(sample_document.sessions)
        ordered = sample_document.sorted_sessions()
        assert [s.start.day for s in ordered] == [1, 5]
        assert sample_document.sessions == original

    def test_increment_invoice_number(self, sample_document):
        assert sample_document.increment_invoice_number() == 43
        assert sample_document.invoice_number == 43

    def test_resolve_filename(self, sample_document):
        """Test $INV and $DATE expansion."""
        assert sample_document.resolve_filename() == "invoice_0042_2024_01_31"

    def test_resolve_filename_without_tokens(self):
        document = InvoiceDocument(filename="plain")
        assert document.resolve_filename() == "plain"

    def test_invalid_rate_rejected(self):
        """Test that a non-numeric rate is rejected on assignment."""
        document = InvoiceDocument()
        with pytest.raises(ValueError):
            document.rate = "fifty"
        assert document.rate == 0.0

    @pytest.mark.parametrize("value", ["12", 12.0, True])
    def test_invoice_number_must_be_an_integer(self, value):
        """Test that numeric strings, floats and booleans are not coerced."""
        document = InvoiceDocument()
        with pytest.raises(ValueError):
            document.invoice_number = value
        assert document.invoice_number == 1


class TestValidationIssue:
    """Tests for the ValidationIssue model."""

    def test_severity_pattern(self):
        """Test that only known severities are accepted."""
        with pytest.raises(ValueError):
            ValidationIssue(
                field="rate",
                issue_type="invalid_number",
                message="bad",
                severity="fatal",
            )


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.DOCUMENT_CREATED,
            description="Test document created",
        )
        assert event.event_type == AuditEventType.DOCUMENT_CREATED
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.document_loaded("/tmp/invoice.json", session_count=3)
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "document_loaded"
        assert log_dict["document_path"] == "/tmp/invoice.json"
        assert log_dict["details"]["session_count"] == 3

    def test_audit_event_builder_exported(self):
        """Test AuditEventBuilder.invoice_exported."""
        event = AuditEventBuilder.invoice_exported(
            template_path="template.docx",
            out_path="out/invoice_0042.docx",
            document_path=None,
            total=275.0,
        )
        assert event.event_type == AuditEventType.INVOICE_EXPORTED
        assert event.description == "Invoice exported: invoice_0042.docx"
        assert event.details["total"] == 275.0
        assert event.document_path is None

    def test_audit_event_builder_failure(self):
        """Test AuditEventBuilder.operation_failed."""
        event = AuditEventBuilder.operation_failed(
            AuditEventType.DOCUMENT_SAVE_FAILED,
            "/tmp/invoice.json",
            OSError("disk full"),
        )
        assert event.severity == AuditSeverity.ERROR
        assert event.error_type == "OSError"
        assert event.error_message == "disk full"
        assert event.description == "Document save failed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
