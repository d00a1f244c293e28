"""
GuestRecordStore
----------------
Ordered, indexable holder of guest entries. Insertion and removal happen at
the tail only; positions are the guests' identity.
"""

from __future__ import annotations

from typing import Iterator, List

from ..models.guest_entry import GuestEntry


class GuestRecordStore:
    """Plain resizable list of guests with tail-only append/remove."""

    def __init__(self) -> None:
        self._entries: List[GuestEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> GuestEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[GuestEntry]:
        return iter(self._entries)

    def append(self, entry: GuestEntry) -> None:
        self._entries.append(entry)

    def pop_tail(self) -> GuestEntry:
        return self._entries.pop()

    def snapshot(self) -> tuple[GuestEntry, ...]:
        """Detached copies of all entries, in order."""
        return tuple(e.copy() for e in self._entries)
