"""Deterministic name ordering for listing entries."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Entry


def entry_sort_key(entry: Entry) -> bytes:
    """Byte-wise name key, so ``B`` sorts before ``a`` regardless of locale."""
    return entry.name


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return a new list of ``entries`` in ascending byte-wise name order.

    ``sorted`` is stable, so entries with equal names keep their input order.
    """
    return sorted(entries, key=entry_sort_key)


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
