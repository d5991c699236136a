"""CSV rendering of ledger records.

Columns (exact order): ``Index, Date, Type, Description, Debit, Credit,
Balance``. Dates are ISO ``YYYY-MM-DD``; amounts are two-decimal strings with
an ASCII dot (``"1234.56"``). Parsing back is not supported.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from io import StringIO
from typing import TextIO

from .models import LedgerRecord
from .money import format_money

CSV_HEADER = ("Index", "Date", "Type", "Description", "Debit", "Credit", "Balance")


def record_to_row(record: LedgerRecord) -> list[str]:
    return [
        str(record.index),
        record.date.isoformat(),
        record.type,
        record.description,
        format_money(record.debit),
        format_money(record.credit),
        format_money(record.balance),
    ]


def write_csv(records: Iterable[LedgerRecord], stream: TextIO) -> int:
    """Write ``records`` as CSV to ``stream`` and return the row count."""

    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    n = 0
    for record in records:
        writer.writerow(record_to_row(record))
        n += 1
    return n


def records_to_csv(records: Iterable[LedgerRecord]) -> str:
    with StringIO() as f:
        write_csv(records, f)
        return f.getvalue()


__all__ = ["CSV_HEADER", "record_to_row", "records_to_csv", "write_csv"]
