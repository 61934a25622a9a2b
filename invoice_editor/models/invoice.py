"""
Core Data Models for the Invoice Editor

These models define the in-memory invoice and its billable sessions.
They are designed to:
1. Keep every total derived from sessions, rate and tax rate
2. Serialize to the document file without any derived field
3. Validate every field the presentation layer assigns

DESIGN DECISION: Totals are plain properties, not stored fields.
Nothing can cache or persist a stale subtotal.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from invoice_editor.models.codec import LocalDateTime, RoundTripFloat


def _today() -> datetime:
    return datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)


# =============================================================================
# SESSIONS
# =============================================================================

class Session(BaseModel):
    """
    One contiguous billable work interval.

    A finish before the start is accepted and yields negative hours;
    see ``DocumentChecker`` for the warning raised on such sessions.
    """
    model_config = ConfigDict(validate_assignment=True)

    start: LocalDateTime = Field(
        default_factory=_today,
        description="Start of the work interval (local time)"
    )
    finish: LocalDateTime = Field(
        default_factory=_today,
        description="End of the work interval (local time)"
    )

    @property
    def duration_hours(self) -> float:
        """Length of the session in hours, fractional."""
        return (self.finish - self.start).total_seconds() / 3600.0


# =============================================================================
# INVOICE DOCUMENT
# =============================================================================

class InvoiceDocument(BaseModel):
    """
    The full invoice state: metadata, rate, tax rate and sessions.

    Field names are snake_case in Python and camelCase in the document
    file (``invoiceNumber``, ``taxRate``).
    """
    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
    )

    date: LocalDateTime = Field(
        default_factory=_today,
        description="Invoice issue date"
    )
    invoice_number: int = Field(
        default=1,
        alias="invoiceNumber",
        strict=True,
        description="Invoice number (uniqueness is not enforced)"
    )
    consultant: str = ""
    client: str = ""
    filename: str = Field(
        default="",
        description="Export file name; may contain $INV and $DATE tokens"
    )
    services: str = Field(
        default="",
        description="Free-form description of the services rendered"
    )
    sessions: list[Session] = Field(default_factory=list)
    rate: RoundTripFloat = Field(
        default=0.0,
        description="Currency per hour"
    )
    tax_rate: RoundTripFloat = Field(
        default=0.0,
        alias="taxRate",
        description="Tax as a percentage of the subtotal"
    )

    # -------------------------------------------------------------------------
    # Derived totals
    # -------------------------------------------------------------------------

    @property
    def total_hours(self) -> float:
        return sum((session.duration_hours for session in self.sessions), 0.0)

    @property
    def subtotal(self) -> float:
        return self.total_hours * self.rate

    @property
    def tax(self) -> float:
        return self.subtotal * self.tax_rate / 100.0

    @property
    def total(self) -> float:
        return self.subtotal + self.tax

    # -------------------------------------------------------------------------
    # Editing helpers
    # -------------------------------------------------------------------------

    def add_session(self) -> Session:
        """
        Append a new zero-length session.

        It starts (and finishes) where the previous session finished,
        or today at midnight when there is none.
        """
        anchor = self.sessions[-1].finish if self.sessions else _today()
        session = Session(start=anchor, finish=anchor)
        self.sessions.append(session)
        return session

    def remove_session(self, index: int) -> Session:
        """Remove and return the session at ``index``."""
        return self.sessions.pop(index)

    def increment_invoice_number(self) -> int:
        self.invoice_number += 1
        return self.invoice_number

    def sorted_sessions(self) -> list[Session]:
        """Sessions in chronological order of start. The document is untouched."""
        return sorted(self.sessions, key=lambda session: session.start)

    def resolve_filename(self) -> str:
        """
        Expand the filename tokens.

        ``$INV`` becomes the zero-padded invoice number and ``$DATE`` the
        invoice date as ``yyyy_MM_dd``.
        """
        return (
            self.filename
            .replace("$INV", f"{self.invoice_number:04d}")
            .replace("$DATE", self.date.strftime("%Y_%m_%d"))
        )


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in user input or in the document."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'invalid_number', 'negative_duration')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )
