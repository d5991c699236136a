"""Account-history reconstruction.

Turns the text of a scraped history table into ledger records:

1. Each cell is dispatched to a handler chosen by its column header.
2. When the table has no balance column, a running balance is rebuilt from a
   seed (the page's standalone current balance).
3. Rows are reversed from the page's newest-first order into chronological
   order.
4. Each record gets a 1-based index within its calendar day.

Preconditions
-------------
- Data rows arrive newest first, as the bank renders them. This is not
  detected; an oldest-first table would rebuild balances in the wrong
  direction.
- A row whose ``Date`` cell fails to parse keeps ``UNPARSED_DATE`` and still
  takes part in ordering and indexing. It will usually reset the same-day
  counter around it. Its diagnostic is the signal to look at the row.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import TypeAlias

from .balance import extract_balance
from .errors import (
    EmptyHistoryError,
    FieldError,
    FieldErrorKind,
    HistoryError,
    MissingCellError,
    NoBalanceSeedError,
    UnknownColumnError,
)
from .fields import DEFAULT_REGISTRY, FieldRegistry
from .logging_setup import get_logger
from .models import (
    FieldDiagnostic,
    HistoryResult,
    LedgerRecord,
    RecordDraft,
    SnapshotPage,
    TableSnapshot,
)

BalanceSeed: TypeAlias = Callable[[], int]
"""Zero-argument callable producing the current balance in minor units."""

BALANCE_COLUMN_MARKER = "Balance"

logger = get_logger("bank_history.history")


def has_balance_column(field_names: Iterable[str]) -> bool:
    return any(BALANCE_COLUMN_MARKER in name for name in field_names)


def _resolve_seed(balance_seed: BalanceSeed | None) -> int:
    if balance_seed is None:
        raise NoBalanceSeedError(
            "Table has no balance column and no balance seed was provided"
        )
    try:
        seed = balance_seed()
    except HistoryError as e:
        logger.error("Couldn't determine account balance: %s", e)
        raise NoBalanceSeedError(f"Couldn't determine account balance: {e}") from e
    if not isinstance(seed, int) or isinstance(seed, bool):
        logger.error("Balance seed returned %r instead of minor units", seed)
        raise NoBalanceSeedError(f"Balance seed returned {seed!r} instead of minor units")
    return seed


def _fill_draft(
    row_pos: int,
    cells: Sequence[str],
    field_names: Sequence[str],
    registry: FieldRegistry,
    diagnostics: list[FieldDiagnostic],
) -> RecordDraft:
    """Build one draft from a row, collecting per-cell problems into ``diagnostics``."""

    draft = RecordDraft()
    for col, field in enumerate(field_names):
        value = cells[col] if col < len(cells) else None
        try:
            handler = registry.lookup(field)
            if handler is None:
                raise UnknownColumnError(f"No handler found for field: {field}", value=value)
            if value is None:
                raise MissingCellError(f"Row has no cell for field: {field}")
            handler(draft, value)
        except FieldError as e:
            kind, message = e.kind, str(e)
        except ValueError as e:
            # Caller-supplied handlers may raise plain ValueError.
            kind, message = FieldErrorKind.HANDLER_ERROR, str(e)
        else:
            continue
        diagnostics.append(
            FieldDiagnostic(row=row_pos, column=field, value=value, kind=kind, message=message)
        )
        # Every problem is returned in ``diagnostics``; the CLI reports them.
        logger.debug("Error reading %s value: %r: %s", field, value, message)
    return draft


def assign_indices(drafts: Iterable[RecordDraft]) -> list[LedgerRecord]:
    """Freeze chronologically ordered drafts, numbering them within each day.

    The counter restarts at 1 whenever the date differs from the previous
    record's date, however many days or gaps lie between them.
    """

    records: list[LedgerRecord] = []
    current: date | None = None
    index = 0
    for draft in drafts:
        if current is not None and draft.date == current:
            index += 1
        else:
            index = 1
            current = draft.date
        records.append(draft.freeze(index))
    return records


def reconstruct_history(
    header: Sequence[str],
    rows: Iterable[Sequence[str]],
    balance_seed: BalanceSeed | None = None,
    *,
    registry: FieldRegistry = DEFAULT_REGISTRY,
) -> HistoryResult:
    """Reconstruct ledger records from an extracted history table.

    Parameters
    ----------
    header:
        Column labels from the table's header row, untrimmed. Handlers are
        looked up by exact match on this text.
    rows:
        Data rows (header excluded), newest first, each a sequence of raw cell
        text. Cells beyond the header's width are ignored.
    balance_seed:
        Called once, only when no header contains ``"Balance"``, to get the
        current account balance. Any :class:`HistoryError` it raises (e.g.
        :class:`BalanceNotFoundError`), or a non-integer result, becomes
        :class:`NoBalanceSeedError`.
    registry:
        Column handlers. Defaults to :data:`DEFAULT_REGISTRY`.

    Returns
    -------
    HistoryResult
        One record per data row in ascending chronological order, plus a
        diagnostic for every cell that could not be used.

    Raises
    ------
    EmptyHistoryError
        If there are no data rows.
    NoBalanceSeedError
        If a running balance is needed and no seed could be obtained.
    """

    data_rows = [list(r) for r in rows]
    if not data_rows:
        raise EmptyHistoryError("No account history found in page")

    field_names = list(header)
    inferred = not has_balance_column(field_names)
    balance = _resolve_seed(balance_seed) if inferred else 0

    diagnostics: list[FieldDiagnostic] = []
    drafts: list[RecordDraft] = []
    for row_pos, cells in enumerate(data_rows):
        draft = _fill_draft(row_pos, cells, field_names, registry, diagnostics)

        if inferred:
            # Walking back in time: the balance before this row is the
            # balance after it minus the row's own net effect.
            draft.balance = balance
            balance -= draft.net

        drafts.append(draft)

    drafts.reverse()
    records = assign_indices(drafts)

    logger.debug(
        "Reconstructed %d record(s) from %d column(s); balance inferred: %s; %d diagnostic(s)",
        len(records),
        len(field_names),
        inferred,
        len(diagnostics),
    )
    return HistoryResult(
        records=tuple(records),
        diagnostics=tuple(diagnostics),
        balance_inferred=inferred,
    )


def reconstruct_from_snapshot(
    snapshot: TableSnapshot,
    *,
    registry: FieldRegistry = DEFAULT_REGISTRY,
    seed_balance: int | None = None,
) -> HistoryResult:
    """Reconstruct a saved page snapshot.

    ``seed_balance`` overrides the snapshot's balance widgets when given.
    """

    if seed_balance is not None:
        seed: BalanceSeed = lambda: seed_balance  # noqa: E731
    else:
        page = SnapshotPage(snapshot)
        seed = lambda: extract_balance(page)  # noqa: E731
    return reconstruct_history(snapshot.header, snapshot.rows, seed, registry=registry)


__all__ = [
    "BALANCE_COLUMN_MARKER",
    "BalanceSeed",
    "assign_indices",
    "has_balance_column",
    "reconstruct_from_snapshot",
    "reconstruct_history",
]
