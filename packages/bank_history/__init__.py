"""Public interface for the ``bank_history`` package.

Symbol re-exports only; no runtime logic lives here.
"""

from .api import (
    extract_balance,
    parse_money,
    reconstruct_from_snapshot,
    reconstruct_history,
    reconstruct_snapshot_file,
    records_to_csv,
    write_csv,
)
from .balance import ACCOUNT_BALANCE_SELECTOR, ACCOUNT_HISTORY_SELECTOR, BalancePage
from .dates import UNPARSED_DATE, format_query_date, parse_date
from .errors import (
    BalanceNotFoundError,
    DateParseError,
    EmptyHistoryError,
    FieldError,
    FieldErrorKind,
    HistoryError,
    MissingCellError,
    MoneyParseError,
    NoBalanceSeedError,
    StructuralError,
    UnknownColumnError,
)
from .fields import DEFAULT_REGISTRY, FieldHandler, FieldRegistry
from .history import assign_indices
from .models import (
    FieldDiagnostic,
    HistoryResult,
    LedgerRecord,
    RecordDraft,
    SnapshotPage,
    TableSnapshot,
)
from .money import format_money

__all__ = [
    # API
    "assign_indices",
    "extract_balance",
    "format_money",
    "format_query_date",
    "parse_date",
    "parse_money",
    "reconstruct_from_snapshot",
    "reconstruct_history",
    "reconstruct_snapshot_file",
    "records_to_csv",
    "write_csv",
    # Registry
    "DEFAULT_REGISTRY",
    "FieldHandler",
    "FieldRegistry",
    # Models / types
    "BalancePage",
    "FieldDiagnostic",
    "HistoryResult",
    "LedgerRecord",
    "RecordDraft",
    "SnapshotPage",
    "TableSnapshot",
    "UNPARSED_DATE",
    # Locators
    "ACCOUNT_BALANCE_SELECTOR",
    "ACCOUNT_HISTORY_SELECTOR",
    # Errors
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
