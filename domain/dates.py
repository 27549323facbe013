"""
Date normalization for the meal log.

Every date that reaches the store or a query filter goes through
``normalize_date`` first, so a meal written as ``"2017/5/1"`` is found again by
a query for ``(2017, 5, 1)``, ``"2017-05-01"`` or ``"5/1/2017"``.

The canonical key is a ``datetime.date``. Months are 1-based everywhere
(January is 1); there is no 0-based month form.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Sequence, Union

from app.exceptions import InvalidDateError

DateInput = Union[date, datetime, str, Sequence[Union[int, str]]]

# 2017-05-01, 2017/5/1 (same separator on both sides)
_YMD_RE = re.compile(r"^(\d{4})([-/])(\d{1,2})\2(\d{1,2})$")
# 2017-05-01T08:30:00, 2017-05-01 08:30:00.123Z, 2017-05-01T08:30+02:00
_ISO_TS_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?$"
)
# 5/1/2017 as produced by an en-US locale date string
_MDY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_PART_RE = re.compile(r"^\d{1,4}$")


def _build(year: int, month: int, day: int, original: Any) -> date:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(original, str(exc)) from exc


def _to_int(part: Any, original: Any) -> int:
    if isinstance(part, bool):
        raise InvalidDateError(original, "boolean is not a date component")
    if isinstance(part, int):
        return part
    if isinstance(part, str) and _PART_RE.match(part.strip()):
        return int(part.strip())
    raise InvalidDateError(original, f"bad date component {part!r}")


def date_from_parts(year: Any, month: Any, day: Any) -> date:
    """Build the canonical key from separate components (1-based month).

    Components may be ints or digit strings such as the ``"2017"``, ``"05"``
    and ``"1"`` segments of a URL path.
    """
    original = (year, month, day)
    return _build(
        _to_int(year, original), _to_int(month, original), _to_int(day, original), original
    )


def _parse_string(value: str) -> date:
    text = value.strip()
    if not text:
        raise InvalidDateError(value, "empty string")

    m = _YMD_RE.match(text)
    if m:
        return _build(int(m.group(1)), int(m.group(3)), int(m.group(4)), value)

    m = _ISO_TS_RE.match(text)
    if m:
        # Date part as written; no timezone conversion
        return _build(int(m.group(1)), int(m.group(2)), int(m.group(3)), value)

    m = _MDY_RE.match(text)
    if m:
        return _build(int(m.group(3)), int(m.group(1)), int(m.group(2)), value)

    raise InvalidDateError(value, "unrecognized date format")


def normalize_date(value: DateInput) -> date:
    """
    Convert any accepted date representation to the canonical ``date`` key.

    Accepted inputs:
        - ``date`` or ``datetime`` (time of day is dropped)
        - ``(year, month, day)`` tuple or list of ints or digit strings
        - ``"YYYY-MM-DD"`` / ``"YYYY/M/D"``
        - ISO-8601 timestamps such as ``"2017-05-01T08:30:00Z"``
        - ``"M/D/YYYY"`` locale strings

    Raises:
        InvalidDateError: if the value is not a real calendar day
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_string(value)
    if isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise InvalidDateError(value, "expected (year, month, day)")
        return date_from_parts(*value)
    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")
