"""Data models for ``bank_history``.

- :class:`LedgerRecord`: one finished transaction line (frozen).
- :class:`RecordDraft`: the record while field handlers populate it.
- :class:`FieldDiagnostic` / :class:`HistoryResult`: the reconstructor's
  output, records plus the per-cell problems met along the way.
- :class:`TableSnapshot`: the on-disk JSON form of a page's extracted history
  table and balance widgets, validated with pydantic.

All monetary fields are integer minor units (see :mod:`bank_history.money`).
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from os import PathLike
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from .dates import UNPARSED_DATE
from .errors import FieldErrorKind

# ---------------------------------------------------------------------------
# Ledger records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LedgerRecord:
    """A single transaction line in chronological output.

    Attributes
    ----------
    index:
        1-based position within the record's calendar day. Not globally
        unique; it keeps same-day transactions distinguishable and ordered.
    date:
        Calendar date. ``UNPARSED_DATE`` when the source cell did not parse.
    type, description:
        Trimmed free text; ``""`` means not present.
    debit, credit:
        Non-negative minor units; ``0`` when the column is absent or blank.
    balance:
        Account balance in minor units after this transaction is applied.
    """

    index: int
    date: date
    type: str
    description: str
    debit: int
    credit: int
    balance: int

    @property
    def net(self) -> int:
        return self.credit - self.debit


@dataclass(slots=True)
class RecordDraft:
    """Mutable record under construction; handlers write into it in place."""

    date: date = UNPARSED_DATE
    type: str = ""
    description: str = ""
    debit: int = 0
    credit: int = 0
    balance: int = 0

    @property
    def net(self) -> int:
        return self.credit - self.debit

    def freeze(self, index: int) -> LedgerRecord:
        return LedgerRecord(
            index=index,
            date=self.date,
            type=self.type,
            description=self.description,
            debit=self.debit,
            credit=self.credit,
            balance=self.balance,
        )


# ---------------------------------------------------------------------------
# Reconstruction output
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldDiagnostic:
    """One cell that could not be used.

    ``row`` is the 0-based data-row position in *source* order (header
    excluded), so it points back at the table the caller extracted.
    """

    row: int
    column: str
    value: str | None
    kind: FieldErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class HistoryResult:
    """Records in ascending chronological order plus per-cell diagnostics."""

    records: tuple[LedgerRecord, ...]
    diagnostics: tuple[FieldDiagnostic, ...] = ()
    balance_inferred: bool = False

    def __iter__(self) -> Iterator[LedgerRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def diagnostics_for(self, kind: FieldErrorKind) -> list[FieldDiagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]


# ---------------------------------------------------------------------------
# Extracted page snapshots
# ---------------------------------------------------------------------------


class TableSnapshot(BaseModel):
    """Text extracted from one account-history page.

    ``header`` and ``rows`` hold raw cell text (not pre-trimmed) in the
    order the page renders them, which is newest transaction first.
    ``balance_widgets`` holds the text of every element matching the
    account-balance locator, in document order.
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    schema_version: int = 1
    header: list[str]
    rows: list[list[str]]
    balance_widgets: list[str] = []

    @field_validator("schema_version")
    @classmethod
    def _known_schema(cls, v: int) -> int:
        if v != 1:
            raise ValueError(f"unsupported snapshot schema_version: {v}")
        return v

    @classmethod
    def load(cls, path: str | PathLike[str]) -> TableSnapshot:
        text = Path(path).read_text(encoding="utf-8")
        return cls.model_validate(json.loads(text))

    def dump(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(self.model_dump_json(indent=2) + "\n", encoding="utf-8")


class SnapshotPage:
    """Serve a snapshot's saved balance-widget texts as a balance page.

    The widgets were already matched against the balance locator when the
    snapshot was taken, so the selector passed in is not re-evaluated.
    """

    def __init__(self, snapshot: TableSnapshot) -> None:
        self._snapshot = snapshot

    def find_all(self, selector: str) -> Iterator[str]:
        return iter(self._snapshot.balance_widgets)


__all__ = [
    "FieldDiagnostic",
    "HistoryResult",
    "LedgerRecord",
    "RecordDraft",
    "SnapshotPage",
    "TableSnapshot",
]
