"""Input parsing and document checks."""

from invoice_editor.validation.checker import DocumentChecker
from invoice_editor.validation.parsing import (
    InputParseError,
    parse_float,
    parse_float_list,
    parse_int,
)

__all__ = [
    "DocumentChecker",
    "InputParseError",
    "parse_float",
    "parse_float_list",
    "parse_int",
]
