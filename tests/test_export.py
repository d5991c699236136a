import csv
import io
from datetime import date

from bank_history import LedgerRecord, UNPARSED_DATE, records_to_csv, write_csv
from bank_history.export import CSV_HEADER


def _rec(**kw) -> LedgerRecord:
    base = dict(
        index=1,
        date=date(2023, 1, 2),
        type="",
        description="",
        debit=0,
        credit=0,
        balance=0,
    )
    base.update(kw)
    return LedgerRecord(**base)


def test_records_to_csv_layout():
    text = records_to_csv(
        [
            _rec(description="Refund", credit=450, balance=10450),
            _rec(index=2, type="POS", description="Coffee, large", debit=450, balance=10000),
        ]
    )
    assert text.splitlines() == [
        "Index,Date,Type,Description,Debit,Credit,Balance",
        "1,2023-01-02,,Refund,0.00,4.50,104.50",
        '2,2023-01-02,POS,"Coffee, large",4.50,0.00,100.00',
    ]


def test_write_csv_returns_row_count_and_header_only_when_empty():
    buf = io.StringIO()
    assert write_csv([], buf) == 0
    assert buf.getvalue() == ",".join(CSV_HEADER) + "\n"


def test_unparsed_date_renders_as_year_one():
    rows = list(csv.reader(io.StringIO(records_to_csv([_rec(date=UNPARSED_DATE)]))))
    assert rows[1][1] == "0001-01-01"
