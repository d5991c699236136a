"""Per-column field handlers and the header-keyed registry that dispatches them.

A handler takes the :class:`~bank_history.models.RecordDraft` under
construction and the raw text of one cell, trims the text, and writes the
parsed value into the draft. Failures raise a
:class:`~bank_history.errors.FieldError` subclass and leave the field at its
default; the reconstructor decides what to do with them.

Which handlers run, and in what order, is driven by the header row of the
scraped table, so accounts exposing different column sets (checking vs.
credit card) go through the same code with no configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TypeAlias

from .dates import parse_date
from .models import RecordDraft
from .money import parse_money

FieldHandler: TypeAlias = Callable[[RecordDraft, str], None]
"""Populate one field of a draft from one cell's raw text."""


# ---------------------------------------------------------------------------
# Standard handlers
# ---------------------------------------------------------------------------


def date_from_string(draft: RecordDraft, value: str) -> None:
    draft.date = parse_date(value.strip())


def type_from_string(draft: RecordDraft, value: str) -> None:
    draft.type = value.strip()


def description_from_string(draft: RecordDraft, value: str) -> None:
    draft.description = value.strip()


def _money_or_none(value: str) -> int | None:
    # Blank money cells are common (a debit row has no credit) and not errors.
    s = value.strip()
    if not s:
        return None
    return parse_money(s)


def debit_from_string(draft: RecordDraft, value: str) -> None:
    amount = _money_or_none(value)
    if amount is not None:
        draft.debit = amount


def credit_from_string(draft: RecordDraft, value: str) -> None:
    amount = _money_or_none(value)
    if amount is not None:
        draft.credit = amount


def balance_from_string(draft: RecordDraft, value: str) -> None:
    amount = _money_or_none(value)
    if amount is not None:
        draft.balance = amount


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class FieldRegistry(Mapping[str, FieldHandler]):
    """Immutable mapping from exact header text to a field handler.

    Lookups are exact string matches against the header cell text as it
    appears in the table. Use :meth:`extend` to derive a registry that
    recognizes more (or different) columns; this registry is never modified.
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Mapping[str, FieldHandler] | None = None) -> None:
        self._handlers: Mapping[str, FieldHandler] = MappingProxyType(dict(handlers or {}))

    def __getitem__(self, name: str) -> FieldHandler:
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"FieldRegistry({sorted(self._handlers)!r})"

    def lookup(self, name: str) -> FieldHandler | None:
        """Return the handler registered for ``name`` or ``None``."""

        return self._handlers.get(name)

    def extend(self, handlers: Mapping[str, FieldHandler]) -> FieldRegistry:
        """Return a new registry with ``handlers`` added or replacing entries."""

        merged = dict(self._handlers)
        merged.update(handlers)
        return FieldRegistry(merged)

    def without(self, *names: str) -> FieldRegistry:
        """Return a new registry with ``names`` removed (missing names ignored)."""

        return FieldRegistry({k: v for k, v in self._handlers.items() if k not in names})


DEFAULT_REGISTRY = FieldRegistry(
    {
        "Date": date_from_string,
        "Type": type_from_string,
        "Description": description_from_string,
        "Debit": debit_from_string,
        "Credit": credit_from_string,
        "Account Balance": balance_from_string,
    }
)


__all__ = [
    "DEFAULT_REGISTRY",
    "FieldHandler",
    "FieldRegistry",
    "balance_from_string",
    "credit_from_string",
    "date_from_string",
    "debit_from_string",
    "description_from_string",
    "type_from_string",
]
