"""
UploadSlot
----------
Holds the files attached to one upload field (identification, marriage
certificate). Only presence and count matter to the form; file contents are
never opened here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..exceptions.errors import UploadLimitError

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILES = 5


class UploadSlot:
    """Ordered, de-duplicated list of attached file paths with a size cap."""

    def __init__(self, name: str, *, max_files: int = DEFAULT_MAX_FILES) -> None:
        self.name = name
        self.max_files = max(1, int(max_files))
        self._files: List[Path] = []

    @property
    def files(self) -> tuple[Path, ...]:
        return tuple(self._files)

    @property
    def count(self) -> int:
        return len(self._files)

    @property
    def has_files(self) -> bool:
        return self.count > 0

    def add(self, path: str | Path) -> bool:
        """
        Attach *path*. Returns False if it was already attached.

        Raises:
            UploadLimitError: the slot already holds max_files files
        """
        p = Path(path)
        if p in self._files:
            return False
        if len(self._files) >= self.max_files:
            raise UploadLimitError(f"{self.name}: at most {self.max_files} files")
        self._files.append(p)
        logger.debug("%s: attached %s (%d/%d)", self.name, p.name, self.count, self.max_files)
        return True

    def remove(self, path: str | Path) -> bool:
        try:
            self._files.remove(Path(path))
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._files.clear()
