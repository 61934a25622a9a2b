"""
Export Services Package

Fills .docx invoice templates from invoice documents.
"""

from invoice_editor.services.export.formatting import (
    DOCX_LINE_BREAK,
    DOCX_TEXT_RUN,
    format_amount,
    format_currency,
    format_date,
    format_hours,
    format_invoice_number,
    format_rate,
    free_text_markup,
    text_to_markup,
)
from invoice_editor.services.export.template import (
    DEFAULT_TEMPLATE_MEMBER,
    ExportError,
    NoDataError,
    TemplateError,
    TemplateExporter,
)

__all__ = [
    # Formatting
    "DOCX_LINE_BREAK",
    "DOCX_TEXT_RUN",
    "format_amount",
    "format_currency",
    "format_date",
    "format_hours",
    "format_invoice_number",
    "format_rate",
    "free_text_markup",
    "text_to_markup",
    # Exporter
    "DEFAULT_TEMPLATE_MEMBER",
    "ExportError",
    "NoDataError",
    "TemplateError",
    "TemplateExporter",
]
