"""Pytest configuration for test isolation.

The CLI reads ``BANK_HISTORY_*`` variables (and a ``.env`` in the working
directory) and configures the package logger once per process. To keep tests
hermetic, every test runs with those variables cleared, from a scratch working
directory, and with logging reset afterwards.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make sure the workspace `packages/` dir is on sys.path so `bank_history` is importable
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]

from bank_history.logging_setup import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("BANK_HISTORY_LOG_LEVEL", "BANK_HISTORY_SEED_BALANCE"):
        monkeypatch.delenv(name, raising=False)
    # A stray .env in the repo root must not leak into CLI tests.
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield
    reset_logging()
