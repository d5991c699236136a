# ruff: noqa: E402, I001
from __future__ import annotations

import io
from datetime import date
from pathlib import Path

import pytest

from bank_history import (
    FieldErrorKind,
    TableSnapshot,
    reconstruct_snapshot_file,
    write_csv,
)

# A checking account page: the table carries its own running balance.
CHECKING = TableSnapshot(
    header=["Date", "Type", "Description", "Debit", "Credit", "Account Balance"],
    rows=[
        ["\n 01/05/2023 ", " DEBIT CARD ", " BLUE BOTTLE COFFEE ", "$6.25", "", "$2,493.75"],
        ["01/05/2023", "ACH DEPOSIT", "ACME PAYROLL", "", "$2,000.00", "$2,500.00"],
        ["01/03/2023", "CHECK", "CHECK 1042", "$500.00", "", "$500.00"],
        ["01/01/2023", "DEPOSIT", "OPENING", "", "$1,000.00", "$1,000.00"],
    ],
    balance_widgets=["$2,493.75"],
)

# A credit-card style page: no balance column; the standalone widget seeds it.
CARD = TableSnapshot(
    header=["Date", "Description", "Debit", "Credit", "Reward Points"],
    rows=[
        ["02/10/2023", "AIRLINE", "$350.00", "", "700"],
        ["02/09/2023", "PAYMENT THANK YOU", "", "$1,000.00", ""],
        ["02/09/2023", "GROCER", "$82.40", "", "82"],
        ["02/01/2023", "GAS", "bad", "", "40"],
    ],
    balance_widgets=["Statement balance", "$1,432.10"],
)


@pytest.mark.parametrize("snapshot", [CHECKING, CARD], ids=["checking", "card"])
def test_snapshot_file_round_trip_to_csv(tmp_path: Path, snapshot: TableSnapshot) -> None:
    path = tmp_path / "page.json"
    snapshot.dump(path)

    result = reconstruct_snapshot_file(path)
    assert len(result) == len(snapshot.rows)

    dates = [r.date for r in result]
    assert dates == sorted(dates)

    buf = io.StringIO()
    assert write_csv(result, buf) == len(snapshot.rows)
    assert buf.getvalue().startswith("Index,Date,Type,Description,Debit,Credit,Balance\n")


def test_checking_page_keeps_source_balances(tmp_path: Path) -> None:
    path = tmp_path / "checking.json"
    CHECKING.dump(path)
    result = reconstruct_snapshot_file(path)

    assert not result.balance_inferred
    assert result.diagnostics == ()
    assert [(r.date, r.index, r.description, r.balance) for r in result] == [
        (date(2023, 1, 1), 1, "OPENING", 100000),
        (date(2023, 1, 3), 1, "CHECK 1042", 50000),
        (date(2023, 1, 5), 1, "ACME PAYROLL", 250000),
        (date(2023, 1, 5), 2, "BLUE BOTTLE COFFEE", 249375),
    ]
    assert result.records[-1].type == "DEBIT CARD"


def test_card_page_infers_balance_and_reports_bad_cells(tmp_path: Path) -> None:
    path = tmp_path / "card.json"
    CARD.dump(path)
    result = reconstruct_snapshot_file(path)

    assert result.balance_inferred
    records = result.records
    assert records[-1].balance == 143210
    for prev, cur in zip(records, records[1:]):
        assert cur.balance == prev.balance + cur.credit - cur.debit

    assert [(r.description, r.index) for r in records] == [
        ("GAS", 1),
        ("GROCER", 1),
        ("PAYMENT THANK YOU", 2),
        ("AIRLINE", 1),
    ]
    # The unparseable debit is left at zero; the row still counts.
    assert records[0].debit == 0

    assert len(result.diagnostics_for(FieldErrorKind.UNKNOWN_COLUMN)) == 4
    money = result.diagnostics_for(FieldErrorKind.MONEY_PARSE)
    assert [(d.row, d.column, d.value) for d in money] == [(3, "Debit", "bad")]


def test_seed_override_beats_widgets(tmp_path: Path) -> None:
    path = tmp_path / "card.json"
    CARD.dump(path)
    result = reconstruct_snapshot_file(path, seed_balance=0)
    assert result.records[-1].balance == 0


def test_snapshot_load_rejects_unknown_schema(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"schema_version": 2, "header": [], "rows": []}', encoding="utf-8")
    with pytest.raises(ValueError):
        TableSnapshot.load(path)
