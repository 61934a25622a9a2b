"""
Numeric Input Parsing

The presentation layer hands over raw text from its input fields.
These helpers turn that text into numbers or raise an error carrying a
``ValidationIssue`` the UI can display next to the field.

IMPORTANT: Parsing NEVER guesses. Text that is not a plain number is
reported, not corrected.
"""

import math

from invoice_editor.models.invoice import ValidationIssue


class InputParseError(ValueError):
    """Raw input could not be parsed as a number."""

    def __init__(self, issue: ValidationIssue):
        self.issue = issue
        super().__init__(issue.message)


def _invalid(field: str, text: str, expected: str) -> InputParseError:
    return InputParseError(ValidationIssue(
        field=field,
        issue_type="invalid_number",
        message=f"{text!r} is not a valid {expected}",
        severity="error",
        suggested_fix=f"Enter a {expected}",
    ))


def parse_int(text: str, field: str) -> int:
    """Parse a whole number such as an invoice number."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        raise _invalid(field, text, "whole number") from None


def parse_float(text: str, field: str) -> float:
    """Parse a finite decimal number such as a rate or tax rate."""
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise _invalid(field, text, "number") from None
    if not math.isfinite(value):
        raise _invalid(field, text, "number")
    return value


def parse_float_list(text: str, field: str) -> list[float]:
    """
    Parse comma-separated numbers, e.g. ``"1.5, 2, 0.25"``.

    Empty items are skipped, so a trailing comma is harmless.
    """
    return [
        parse_float(item, field)
        for item in text.split(",")
        if item.strip()
    ]
