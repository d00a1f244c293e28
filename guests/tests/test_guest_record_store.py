"""Tail-only storage and detached snapshots."""
from __future__ import annotations

import unittest

from guests.logic.guest_record_store import GuestRecordStore
from guests.models.guest_entry import GuestEntry, Sex


class TestGuestRecordStore(unittest.TestCase):
    def test_append_and_pop_tail(self) -> None:
        store = GuestRecordStore()
        store.append(GuestEntry(full_name="A"))
        store.append(GuestEntry(full_name="B"))
        self.assertEqual(len(store), 2)
        self.assertEqual(store[1].full_name, "B")
        self.assertEqual(store.pop_tail().full_name, "B")
        self.assertEqual([g.full_name for g in store], ["A"])

    def test_snapshot_is_detached(self) -> None:
        store = GuestRecordStore()
        store.append(GuestEntry(full_name="A"))
        snap = store.snapshot()
        store[0].full_name = "Changed"
        store[0].sex = Sex.FEMALE
        self.assertEqual(snap[0].full_name, "A")
        self.assertIs(snap[0].sex, Sex.MALE)

    def test_pop_tail_on_empty_store(self) -> None:
        with self.assertRaises(IndexError):
            GuestRecordStore().pop_tail()


if __name__ == "__main__":
    unittest.main()
