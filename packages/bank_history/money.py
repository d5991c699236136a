"""Money parsing and rendering in integer minor units (pennies).

The history table always renders two decimal digits, so stripping the
currency symbol, the thousands separators and the decimal point leaves the
amount in minor units directly: ``"$1,234.56"`` -> ``"123456"`` -> ``123456``.
No scaling happens here. If the bank ever renders a different number of
decimal digits the results will be off by a power of ten; this module trusts
the upstream table format on that point.
"""

from __future__ import annotations

import re

from .errors import MoneyParseError

_STRIP_CHARS = str.maketrans("", "", "$,.")
_INT_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_money(text: str) -> int:
    """Return ``text`` as an integer count of minor units.

    Every ``$``, ``,`` and ``.`` is removed and the remainder must be a plain
    base-10 integer (optional sign, ASCII digits, nothing else) that fits in a
    signed 64-bit value.

    Raises
    ------
    MoneyParseError
        If the stripped text is empty, contains anything other than digits
        after an optional sign, or overflows int64.
    """

    stripped = text.translate(_STRIP_CHARS)
    if not _INT_RE.fullmatch(stripped):
        raise MoneyParseError(f"invalid amount: {text!r}", value=text)
    value = int(stripped)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MoneyParseError(f"amount out of range: {text!r}", value=text)
    return value


def format_money(minor_units: int) -> str:
    # Exactly two decimals; ASCII dot; leading minus for negatives.
    sign = "-" if minor_units < 0 else ""
    whole, cents = divmod(abs(minor_units), 100)
    return f"{sign}{whole}.{cents:02d}"


__all__ = ["INT64_MAX", "INT64_MIN", "format_money", "parse_money"]
