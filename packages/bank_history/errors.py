"""Exception taxonomy for ``bank_history``.

Two families matter to callers:

- :class:`StructuralError` subclasses mean the table is unusable as a whole.
  :func:`~bank_history.history.reconstruct_history` raises them and returns no
  records.
- :class:`FieldError` subclasses are scoped to a single cell. Parsers and field
  handlers raise them; the reconstructor catches them per cell, records a
  :class:`~bank_history.models.FieldDiagnostic`, logs a warning, and carries on
  with the rest of the row.

:class:`BalanceNotFoundError` sits on its own: it is harmless unless a balance
seed is required, in which case it is escalated to :class:`NoBalanceSeedError`.
"""

from __future__ import annotations

from enum import StrEnum


class FieldErrorKind(StrEnum):
    """Classification attached to every per-cell diagnostic."""

    DATE_PARSE = "date_parse"
    MONEY_PARSE = "money_parse"
    UNKNOWN_COLUMN = "unknown_column"
    MISSING_CELL = "missing_cell"
    HANDLER_ERROR = "handler_error"


class HistoryError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# Structural errors (abort the whole reconstruction)
# ---------------------------------------------------------------------------


class StructuralError(HistoryError):
    """The extracted table cannot be turned into a history at all."""


class EmptyHistoryError(StructuralError):
    """The table has no data rows (a header alone is not a history page)."""


class NoBalanceSeedError(StructuralError):
    """No balance column and no standalone balance to seed the running total."""


# ---------------------------------------------------------------------------
# Field errors (scoped to one cell)
# ---------------------------------------------------------------------------


class FieldError(HistoryError, ValueError):
    """A single cell could not be converted."""

    kind: FieldErrorKind

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class DateParseError(FieldError):
    kind = FieldErrorKind.DATE_PARSE


class MoneyParseError(FieldError):
    kind = FieldErrorKind.MONEY_PARSE


class UnknownColumnError(FieldError):
    kind = FieldErrorKind.UNKNOWN_COLUMN


class MissingCellError(FieldError):
    kind = FieldErrorKind.MISSING_CELL


# ---------------------------------------------------------------------------
# Lookup errors
# ---------------------------------------------------------------------------


class BalanceNotFoundError(HistoryError, LookupError):
    """The page shows no standalone account-balance widget."""


__all__ = [
    "BalanceNotFoundError",
    "DateParseError",
    "EmptyHistoryError",
    "FieldError",
    "FieldErrorKind",
    "HistoryError",
    "MissingCellError",
    "MoneyParseError",
    "NoBalanceSeedError",
    "StructuralError",
    "UnknownColumnError",
]
