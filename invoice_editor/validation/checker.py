"""
Document Checks

Reports conditions the user should see before saving or exporting.
The checker NEVER fixes or rejects anything; negative sessions are
still billed as negative hours.
"""

from invoice_editor.models.invoice import InvoiceDocument, ValidationIssue


class DocumentChecker:
    """Inspects a document and lists warnings about its content."""

    def check(self, document: InvoiceDocument) -> list[ValidationIssue]:
        issues = []

        if not document.sessions:
            issues.append(ValidationIssue(
                field="sessions",
                issue_type="empty",
                message="The invoice has no sessions and cannot be exported",
                severity="info",
                suggested_fix="Add at least one session",
            ))

        for index, session in enumerate(document.sessions):
            if session.finish < session.start:
                issues.append(ValidationIssue(
                    field=f"sessions[{index}]",
                    issue_type="negative_duration",
                    message=(
                        f"Session {index + 1} finishes before it starts "
                        f"({session.duration_hours:.2f} hours)"
                    ),
                    severity="warning",
                    suggested_fix="Check the start and finish times",
                ))

        return issues

    @staticmethod
    def has_warnings(issues: list[ValidationIssue]) -> bool:
        return any(issue.severity == "warning" for issue in issues)
