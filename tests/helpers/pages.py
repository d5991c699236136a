"""Minimal stand-ins for the browser page collaborator."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class FakePage:
    """Return canned balance-widget texts and record the selectors asked for."""

    def __init__(self, widgets: Sequence[str] = ()) -> None:
        self.widgets = list(widgets)
        self.selectors: list[str] = []

    def find_all(self, selector: str) -> Iterator[str]:
        self.selectors.append(selector)
        # Lazy, like a live element query.
        yield from self.widgets


def seed_of(value: int):
    """Return a balance-seed callable that counts its invocations."""

    calls: list[int] = []

    def _seed() -> int:
        calls.append(value)
        return value

    _seed.calls = calls  # type: ignore[attr-defined]
    return _seed
