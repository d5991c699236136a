"""Standalone account-balance extraction.

Some account types (credit cards, for one) render a history table without a
running-balance column. The page still shows the account's current balance in
a separate widget; this module reads it so the reconstructor can seed its
running total.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .errors import BalanceNotFoundError
from .logging_setup import get_logger
from .money import parse_money

# CSS locators used by the browser layer to extract the page text this package
# consumes. Kept here so snapshots and live pages agree on what was matched.
ACCOUNT_BALANCE_SELECTOR = "table[id=Table2] span, table[id=AccountBalanceSection] span"
ACCOUNT_HISTORY_SELECTOR = (
    "table.td-table.td-table-stripe-row.td-table-hover-row.td-table-border-column tbody"
)

logger = get_logger("bank_history.balance")


class BalancePage(Protocol):
    """What the balance extractor needs from a page."""

    def find_all(self, selector: str) -> Iterable[str]:
        """Return the text of every element matching ``selector``, in document order."""
        ...


def extract_balance(page: BalancePage) -> int:
    """Return the account balance shown on ``page`` in minor units.

    Several balance widgets can match the locator; the last one on the page
    carries the authoritative total, so that is the one parsed.

    Raises
    ------
    BalanceNotFoundError
        If nothing matches the balance locator.
    MoneyParseError
        If the last matching widget's text is not an amount.
    """

    last: str | None = None
    count = 0
    for text in page.find_all(ACCOUNT_BALANCE_SELECTOR):
        last = text
        count += 1

    if last is None:
        raise BalanceNotFoundError("Unable to find account balance in page")

    logger.debug("Balance widgets matched: %d; using last: %r", count, last)
    return parse_money(last.strip())


__all__ = [
    "ACCOUNT_BALANCE_SELECTOR",
    "ACCOUNT_HISTORY_SELECTOR",
    "BalancePage",
    "extract_balance",
]
