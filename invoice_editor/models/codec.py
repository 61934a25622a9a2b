"""
Field Codecs

Explicit encode/decode functions for the custom-typed fields of the
invoice document. They are attached to the models through ``Annotated``
types, so the generic pydantic JSON reader/writer calls them for every
date and number it handles.

DESIGN DECISION: Dates are stored as local wall-clock time in the fixed
pattern ``yyyy-MM-ddTHH:mm:ss``. No offset and no fractional seconds are
ever written, and a zone suffix found on read is folded into local time.
"""

import math
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


def encode_datetime(value: datetime) -> str:
    """Encode a datetime as ``yyyy-MM-ddTHH:mm:ss`` in local time."""
    return value.replace(microsecond=0, tzinfo=None).isoformat(timespec="seconds")


def decode_datetime(value: Any) -> datetime:
    """
    Decode a stored date into a naive local datetime at second precision.

    Accepts ISO-8601 strings (with or without a zone suffix), ``datetime``
    and ``date`` instances. Aware values are converted to local time before
    the zone is dropped.

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}") from None
    else:
        raise ValueError(f"Expected a date string, got {type(value).__name__}")

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except OverflowError:
            raise ValueError(f"Invalid date: {value!r}") from None
    return parsed.replace(microsecond=0)


def encode_float(value: float) -> float:
    """Floats are written with their shortest round-trip representation."""
    return float(value)


def decode_float(value: Any) -> float:
    """
    Decode a stored number.

    Raises:
        ValueError: For booleans, non-numeric values and non-finite numbers
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a number, got {type(value).__name__}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


LocalDateTime = Annotated[
    datetime,
    BeforeValidator(decode_datetime),
    PlainSerializer(encode_datetime, return_type=str, when_used="json"),
]

RoundTripFloat = Annotated[
    float,
    BeforeValidator(decode_float),
    PlainSerializer(encode_float, return_type=float, when_used="json"),
]
