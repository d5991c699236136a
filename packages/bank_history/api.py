"""Public API surface for ``bank_history``.

The reconstruction logic lives in :mod:`bank_history.history`; this module
re-exports the entry points callers need and adds the file-level helpers the
CLI builds on.
"""

from __future__ import annotations

from os import PathLike

from .balance import extract_balance
from .export import records_to_csv, write_csv
from .fields import DEFAULT_REGISTRY, FieldRegistry
from .history import reconstruct_from_snapshot, reconstruct_history
from .models import HistoryResult, TableSnapshot
from .money import parse_money


def reconstruct_snapshot_file(
    path: str | PathLike[str],
    *,
    registry: FieldRegistry = DEFAULT_REGISTRY,
    seed_balance: int | None = None,
) -> HistoryResult:
    """Load a JSON page snapshot from ``path`` and reconstruct it.

    Snapshot validation failures surface as ``pydantic.ValidationError``;
    unreadable files as ``OSError``; malformed JSON as ``ValueError``.
    """

    snapshot = TableSnapshot.load(path)
    return reconstruct_from_snapshot(snapshot, registry=registry, seed_balance=seed_balance)


__all__ = [
    "extract_balance",
    "parse_money",
    "reconstruct_from_snapshot",
    "reconstruct_history",
    "reconstruct_snapshot_file",
    "records_to_csv",
    "write_csv",
]
