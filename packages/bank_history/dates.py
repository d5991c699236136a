"""Date helpers for the account-history table.

Parsing is locale-flexible via ``python-dateutil`` with month-first ordering
for ambiguous numeric dates, matching the US bank's ``MM/DD/YYYY`` rendering.
The same ``MM/DD/YYYY`` form is what the browser layer types into the
history page's start/end date fields; :func:`format_query_date` produces it.
"""

from __future__ import annotations

from datetime import date, datetime

from dateutil import parser as dtparse

from .errors import DateParseError

QUERY_DATE_FORMAT = "%m/%d/%Y"

# Default date for records whose ``Date`` cell never parsed.
UNPARSED_DATE = date.min

# Two defaults that differ in year, month and day.
_DEFAULTS = (datetime(1904, 1, 1), datetime(1908, 2, 2))


def parse_date(text: str) -> date:
    """Parse a date cell into a calendar date.

    ``MM/DD/YYYY`` is tried first; anything else falls through to
    ``dateutil``'s fuzzy-free parser with ``dayfirst=False``. The cell must
    carry a year, month and day; partial dates such as ``"Jan 5"`` or ``"2023"``
    are rejected rather than completed from the clock. Time-of-day
    components, if any, are dropped.
    """

    s = text.strip()
    if not s:
        raise DateParseError("date is empty", value=text)
    try:
        return datetime.strptime(s, QUERY_DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        first = dtparse.parse(s, dayfirst=False, default=_DEFAULTS[0])
        second = dtparse.parse(s, dayfirst=False, default=_DEFAULTS[1])
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"invalid date: {text!r}", value=text) from exc
    # dateutil fills missing components from ``default``; differing results
    # mean the cell lacked a year, month or day.
    if first.date() != second.date():
        raise DateParseError(f"incomplete date: {text!r}", value=text)
    return first.date()


def format_query_date(value: date) -> str:
    return value.strftime(QUERY_DATE_FORMAT)


__all__ = ["QUERY_DATE_FORMAT", "UNPARSED_DATE", "format_query_date", "parse_date"]
