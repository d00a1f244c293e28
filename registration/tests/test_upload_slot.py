"""Upload slot presence/count bookkeeping."""
from __future__ import annotations

import unittest
from pathlib import Path

from registration.exceptions.errors import UploadLimitError
from registration.logic.upload_slot import UploadSlot


class TestUploadSlot(unittest.TestCase):
    def setUp(self) -> None:
        self.slot = UploadSlot("identification", max_files=2)

    def test_empty_slot(self) -> None:
        self.assertEqual(self.slot.count, 0)
        self.assertFalse(self.slot.has_files)

    def test_add_and_remove(self) -> None:
        self.assertTrue(self.slot.add("/tmp/a.jpg"))
        self.assertTrue(self.slot.has_files)
        self.assertEqual(self.slot.files, (Path("/tmp/a.jpg"),))
        self.assertTrue(self.slot.remove("/tmp/a.jpg"))
        self.assertFalse(self.slot.remove("/tmp/a.jpg"))
        self.assertEqual(self.slot.count, 0)

    def test_duplicate_ignored(self) -> None:
        self.slot.add("/tmp/a.jpg")
        self.assertFalse(self.slot.add(Path("/tmp/a.jpg")))
        self.assertEqual(self.slot.count, 1)

    def test_limit(self) -> None:
        self.slot.add("/tmp/a.jpg")
        self.slot.add("/tmp/b.jpg")
        with self.assertRaises(UploadLimitError):
            self.slot.add("/tmp/c.jpg")
        self.assertEqual(self.slot.count, 2)

    def test_clear(self) -> None:
        self.slot.add("/tmp/a.jpg")
        self.slot.clear()
        self.assertEqual(self.slot.files, ())

    def test_files_are_never_opened(self) -> None:
        self.assertTrue(self.slot.add("/does/not/exist.png"))


if __name__ == "__main__":
    unittest.main()
