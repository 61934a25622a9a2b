"""
Placeholder Value Formatting

Fixed formats shared with human-edited templates. Rounding is half
away from zero, applied only here and never in the model.

    hours      0.0#        5.0, 5.25
    rate       0.00        50.00
    amounts    #,##0.00    1,250.00
    currency   $#,##0.00   $1,375.00
    invoice    0000        0042
    dates      yyyy-MM-dd  2024-01-05
"""

import math
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from xml.sax.saxutils import escape

DOCX_LINE_BREAK = '</w:t><w:br/><w:t xml:space="preserve">'
DOCX_TEXT_RUN = '</w:t><w:t xml:space="preserve">'

_LINE_ENDING = re.compile(r"\r\n|\n\r|\n|\r")
_CENTS = Decimal("0.01")


def _to_cents(value: float) -> Decimal:
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value!r}")
    return Decimal(repr(float(value))).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_hours(value: float) -> str:
    """At least one decimal, at most two."""
    text = f"{_to_cents(value):.2f}"
    return text[:-1] if text.endswith("0") else text


def format_rate(value: float) -> str:
    return f"{_to_cents(value):.2f}"


def format_amount(value: float) -> str:
    """Thousands-grouped with exactly two decimals."""
    return f"{_to_cents(value):,.2f}"


def format_currency(value: float, symbol: str = "$") -> str:
    amount = _to_cents(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_invoice_number(number: int) -> str:
    return f"{number:04d}"


def format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d")


def text_to_markup(text: str) -> str:
    """
    Make free text safe for a WordprocessingML text run.

    Markup characters are escaped and each line ending (CRLF, LFCR, LF
    or CR) closes the run, inserts a break and reopens a
    whitespace-preserving run.
    """
    return _LINE_ENDING.sub(DOCX_LINE_BREAK, escape(text))


def free_text_markup(text: str) -> str:
    """
    ``text_to_markup`` behind a fresh whitespace-preserving run.

    Templates usually hold the placeholder in a plain ``<w:t>``, which
    would drop the leading spaces of the substituted text.
    """
    return DOCX_TEXT_RUN + text_to_markup(text)
