"""
Immutable views handed out by the roster synchronizer.

Observers and callers only ever see these snapshots; the live guest list stays
inside the synchronizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from .guest_entry import GuestEntry


RosterEventType = Literal["resized", "guest_updated"]


@dataclass(frozen=True, slots=True)
class RosterState:
    """Roster content plus the requirement derived from it."""

    guests: tuple[GuestEntry, ...]
    desired_count: int
    requires_marriage_certificate: bool

    def __len__(self) -> int:
        return len(self.guests)


@dataclass(frozen=True, slots=True)
class RosterChangedEvent:
    """Published after every call that changed roster shape or content."""

    type: RosterEventType
    state: RosterState
    ts_utc: datetime
