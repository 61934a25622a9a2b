"""
Invoice Template Export

Produces the final invoice by substituting computed values into a
.docx template. A .docx file is a ZIP archive; the body text lives in
``word/document.xml``.

Flow:
1. Check there is something to bill (at least one session)
2. Build the placeholder table from the document
3. Read the template archive and its markup member
4. Replace every placeholder occurrence (exact literal match)
5. Rebuild the archive in memory, copying every other member as is
6. Atomically write the result to the destination

The template file is never modified.

Placeholders:
    [DATE] [INVOICE] [CONSULTANT] [CLIENT] [SERVICE]
    [PRICE] [ITEM] [TOTAL_HOURS] [SUBTOT] [TAX] [TOTAL]

Tokens missing from a template are simply not substituted.
"""

import copy
import io
import zipfile
from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape

import structlog

from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.services.export.formatting import (
    format_amount,
    format_currency,
    format_date,
    format_hours,
    format_invoice_number,
    format_rate,
    free_text_markup,
)
from invoice_editor.services.persistence.files import atomic_write_bytes

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]

DEFAULT_TEMPLATE_MEMBER = "word/document.xml"
MARKUP_ENCODING = "utf-8"


class ExportError(Exception):
    """Base exception for invoice export."""
    pass


class TemplateError(ExportError):
    """Template is missing, unreadable or lacks the markup member."""
    pass


class NoDataError(ExportError):
    """There are no sessions to bill."""
    pass


class TemplateExporter:
    """
    Fills a .docx template from an invoice document.

    Stateless apart from configuration; one instance can serve any
    number of exports.
    """

    def __init__(
        self,
        member: str = DEFAULT_TEMPLATE_MEMBER,
        currency_symbol: str = "$",
    ):
        """
        Args:
            member: Archive member holding the markup to fill
            currency_symbol: Symbol for the rate and the total
        """
        self._member = member
        self._currency_symbol = currency_symbol

    @property
    def member(self) -> str:
        return self._member

    def service_summary(self, document: InvoiceDocument) -> str:
        """
        Plain-text body of the [SERVICE] placeholder.

        Raises:
            NoDataError: If the document has no sessions
        """
        sessions = document.sorted_sessions()
        if not sessions:
            raise NoDataError("Cannot export an invoice without sessions")

        first_day = format_date(sessions[0].start)
        last_day = format_date(sessions[-1].start)
        hours = format_hours(document.total_hours)
        rate = format_rate(document.rate)

        return (
            f"{first_day} to {last_day}\n"
            f"{hours} hours @ {self._currency_symbol}{rate}/h\n\n"
            f"{document.services}"
        )

    def build_replacements(self, document: InvoiceDocument) -> dict[str, str]:
        """
        Placeholder token -> markup, in substitution order.

        Raises:
            NoDataError: If the document has no sessions
        """
        summary = self.service_summary(document)
        subtotal = format_amount(document.subtotal)

        return {
            "[DATE]": format_date(document.date),
            "[INVOICE]": format_invoice_number(document.invoice_number),
            "[CONSULTANT]": free_text_markup(document.consultant),
            "[CLIENT]": free_text_markup(document.client),
            "[SERVICE]": free_text_markup(summary),
            "[PRICE]": subtotal,
            "[ITEM]": subtotal,
            "[TOTAL_HOURS]": format_hours(document.total_hours),
            "[SUBTOT]": subtotal,
            "[TAX]": format_amount(document.tax),
            "[TOTAL]": escape(format_currency(document.total, self._currency_symbol)),
        }

    @staticmethod
    def render(markup: str, replacements: dict[str, str]) -> str:
        """Apply each replacement to every occurrence of its token."""
        for token, value in replacements.items():
            markup = markup.replace(token, value)
        return markup

    def _read_template(self, template_path: Path) -> tuple[list[tuple[zipfile.ZipInfo, bytes]], str]:
        """Load every member of the template; return them with the decoded markup."""
        if not template_path.is_file():
            raise TemplateError(f"Template was not found: {template_path}")

        try:
            with zipfile.ZipFile(template_path) as source:
                members = [(copy.copy(info), source.read(info)) for info in source.infolist()]
        except zipfile.BadZipFile as e:
            raise TemplateError(f"Template is not a valid archive: {template_path}") from e

        for info, data in members:
            if info.filename == self._member:
                try:
                    return members, data.decode(MARKUP_ENCODING)
                except UnicodeDecodeError as e:
                    raise TemplateError(
                        f"Template member {self._member} is not valid {MARKUP_ENCODING}"
                    ) from e

        raise TemplateError(f"Template has no {self._member} member: {template_path}")

    def _build_archive(
        self,
        members: list[tuple[zipfile.ZipInfo, bytes]],
        markup: str,
    ) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as target:
            for info, data in members:
                if info.filename == self._member:
                    target.writestr(
                        info,
                        markup.encode(MARKUP_ENCODING),
                        compress_type=zipfile.ZIP_DEFLATED,
                        compresslevel=9,
                    )
                else:
                    target.writestr(info, data)
        return buffer.getvalue()

    def export(
        self,
        document: InvoiceDocument,
        template_path: PathLike,
        out_path: PathLike,
    ) -> Path:
        """
        Write the filled invoice to ``out_path``.

        Returns:
            The path written

        Raises:
            NoDataError: If the document has no sessions
            TemplateError: If the template cannot be used
        """
        template_path = Path(template_path)
        out_path = Path(out_path)

        replacements = self.build_replacements(document)
        members, markup = self._read_template(template_path)
        payload = self._build_archive(members, self.render(markup, replacements))
        atomic_write_bytes(out_path, payload)

        logger.info(
            "invoice_exported",
            template=str(template_path),
            out_path=str(out_path),
            sessions=len(document.sessions),
        )
        return out_path
