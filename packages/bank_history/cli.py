"""CLI for the ``bank_history`` package.

Works on JSON page snapshots (see :class:`~bank_history.models.TableSnapshot`)
written by the browser layer. Environment variables are loaded from a local
``.env`` via ``python-dotenv`` before any command runs:

- ``BANK_HISTORY_LOG_LEVEL``: logging level for the package logger.
- ``BANK_HISTORY_SEED_BALANCE``: seed balance (money text such as
  ``"$1,234.56"``) used when ``--seed-balance`` is not given.

Exit codes: 0 success, 1 unusable input (unreadable snapshot, structural
error), 2 field diagnostics present under ``--strict``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import MoneyParseError, StructuralError
from .logging_setup import configure_logging, get_logger
from .models import HistoryResult, TableSnapshot
from .money import format_money, parse_money

SEED_BALANCE_ENV = "BANK_HISTORY_SEED_BALANCE"

app = typer.Typer(
    name="bank-history",
    no_args_is_help=True,
    add_completion=False,
    help="Reconstruct ledger records from scraped bank account-history tables.",
)
console = Console()
err_console = Console(stderr=True)

logger = get_logger("bank_history.cli")


# ---- Small module-level helpers used by commands -----------------------------


def _resolve_seed(seed_text: str | None) -> int | None:
    """Parse ``--seed-balance`` or the env fallback; ``None`` when neither is set."""

    raw = seed_text if seed_text is not None else os.getenv(SEED_BALANCE_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return parse_money(raw.strip())
    except MoneyParseError as e:
        err_console.print(f"[red]Error:[/red] invalid seed balance: {e}")
        raise typer.Exit(1) from e


def _load_and_reconstruct(snapshot_path: Path, seed: int | None) -> HistoryResult:
    # Deferred import keeps CLI startup light.
    from .history import reconstruct_from_snapshot

    try:
        snapshot = TableSnapshot.load(snapshot_path)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error:[/red] File not found: {snapshot_path}")
        raise typer.Exit(1) from e
    except PermissionError as e:
        err_console.print(f"[red]Error:[/red] Permission denied: {snapshot_path}")
        raise typer.Exit(1) from e
    except (ValidationError, ValueError) as e:
        err_console.print(
            f"[red]Error:[/red] Invalid snapshot '{snapshot_path}': {escape(str(e))}"
        )
        raise typer.Exit(1) from e

    try:
        return reconstruct_from_snapshot(snapshot, seed_balance=seed)
    except StructuralError as e:
        logger.error("Reconstruction failed for %s: %s", snapshot_path, e)
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _report_diagnostics(result: HistoryResult) -> None:
    for d in result.diagnostics:
        err_console.print(
            f"[yellow]warning:[/yellow] row {d.row} column {escape(repr(d.column))}: "
            f"{d.kind.value}: {escape(d.message)}"
        )


SNAPSHOT_ARGUMENT = typer.Argument(
    help="Path to a JSON page snapshot (header, rows, balance_widgets).",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
SEED_OPTION = typer.Option(
    "--seed-balance",
    help=f"Current balance to seed the running total (falls back to {SEED_BALANCE_ENV}).",
)


# ---- Commands ----------------------------------------------------------------


@app.command("reconstruct")
def reconstruct_cmd(
    snapshot_path: Annotated[Path, SNAPSHOT_ARGUMENT],
    out: Annotated[
        Optional[Path], typer.Option("--out", "-o", help="Write CSV here instead of stdout.")
    ] = None,
    seed_balance: Annotated[Optional[str], SEED_OPTION] = None,
    strict: Annotated[
        bool, typer.Option(help="Exit with status 2 if any cell could not be parsed.")
    ] = False,
) -> None:
    """Reconstruct a snapshot and write the ledger as CSV."""

    from .export import records_to_csv, write_csv

    result = _load_and_reconstruct(snapshot_path, _resolve_seed(seed_balance))

    if out is not None:
        with out.open("w", encoding="utf-8", newline="") as f:
            n = write_csv(result.records, f)
        logger.info("Wrote %d record(s) to %s", n, out)
    else:
        typer.echo(records_to_csv(result.records), nl=False)

    _report_diagnostics(result)
    if strict and result.diagnostics:
        raise typer.Exit(2)


@app.command("show")
def show_cmd(
    snapshot_path: Annotated[Path, SNAPSHOT_ARGUMENT],
    seed_balance: Annotated[Optional[str], SEED_OPTION] = None,
) -> None:
    """Render a reconstructed snapshot as a table."""

    result = _load_and_reconstruct(snapshot_path, _resolve_seed(seed_balance))

    title = "Account history" + (" (balance inferred)" if result.balance_inferred else "")
    table = Table(title=title)
    for name in ("#", "Date", "Type", "Description", "Debit", "Credit", "Balance"):
        table.add_column(name, justify="right" if name in {"Debit", "Credit", "Balance"} else "left")
    for r in result.records:
        table.add_row(
            str(r.index),
            r.date.isoformat(),
            r.type,
            r.description,
            format_money(r.debit) if r.debit else "",
            format_money(r.credit) if r.credit else "",
            format_money(r.balance),
        )
    console.print(table)
    _report_diagnostics(result)


@app.command("parse-money")
def parse_money_cmd(
    text: Annotated[str, typer.Argument(help="Amount text, e.g. '$1,234.56'.")],
) -> None:
    """Print an amount as integer minor units."""

    try:
        value = parse_money(text.strip())
    except MoneyParseError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    typer.echo(str(value))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    # override=False keeps already-set environment variables.
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:  # pragma: no cover - console-script entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
