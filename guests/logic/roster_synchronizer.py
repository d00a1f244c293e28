"""RosterSynchronizer - keeps the guest list in step with the desired count."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional

from ..exceptions.errors import (
    IndexOutOfRangeError,
    InvalidCountError,
    InvalidGuestFieldValueError,
    ReentrantUpdateError,
    RosterClosedError,
    UnknownGuestFieldError,
)
from ..models.guest_entry import GUEST_FIELDS, GuestEntry, Sex
from ..models.roster_state import RosterChangedEvent, RosterEventType, RosterState
from .guest_record_store import GuestRecordStore
from .marriage_rule import DEFAULT_MOROCCAN_TOKEN, requires_marriage_certificate

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_COUNTS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)

RosterObserver = Callable[[RosterChangedEvent], None]


class RosterSynchronizer:
    """
    Owns the roster and the marriage certificate flag derived from it.

    Responsibilities:
    - Resize the roster to the desired count (append defaults / drop tail)
    - Apply single-field updates to one guest
    - Recompute the requirement after every operation and publish changes

    All calls are synchronous. Mutating the roster from inside an observer
    callback is refused.
    """

    def __init__(
            self,
            store: Optional[GuestRecordStore] = None,
            *,
            allowed_counts: Iterable[int] = DEFAULT_ALLOWED_COUNTS,
            moroccan_token: str = DEFAULT_MOROCCAN_TOKEN,
            initial_count: Optional[int] = None,
    ) -> None:
        """
        Args:
            store: Backing store, a fresh one if omitted
            allowed_counts: The enumerable set of guest counts offered to the user
            moroccan_token: Nationality value compared verbatim by the derivation
            initial_count: Count applied right away (no observers exist yet);
                the store size if allowed, else the smallest allowed count

        Raises:
            InvalidCountError: allowed_counts is empty or leaves 1..6
        """
        self._store = store if store is not None else GuestRecordStore()
        self._allowed: tuple[int, ...] = tuple(sorted(set(int(c) for c in allowed_counts)))
        if not self._allowed or not set(self._allowed) <= set(DEFAULT_ALLOWED_COUNTS):
            raise InvalidCountError(self._allowed, DEFAULT_ALLOWED_COUNTS)
        self._token = moroccan_token
        self._observers: List[RosterObserver] = []
        self._busy = False
        self._closed = False
        self._desired_count = len(self._store)
        self._requires = self.recompute_requirement()

        if initial_count is None:
            initial_count = self._desired_count if self._desired_count in self._allowed else self._allowed[0]
        self.set_desired_count(initial_count)

    # ------------------------------------------------------------------ #
    #  Read-only views                                                   #
    # ------------------------------------------------------------------ #
    @property
    def allowed_counts(self) -> tuple[int, ...]:
        return self._allowed

    @property
    def moroccan_token(self) -> str:
        return self._token

    @property
    def desired_count(self) -> int:
        return self._desired_count

    @property
    def roster(self) -> tuple[GuestEntry, ...]:
        return self._store.snapshot()

    @property
    def requires_marriage_certificate(self) -> bool:
        return self._requires

    def state(self) -> RosterState:
        return RosterState(
            guests=self._store.snapshot(),
            desired_count=self._desired_count,
            requires_marriage_certificate=self._requires,
        )

    # ------------------------------------------------------------------ #
    #  Observers                                                         #
    # ------------------------------------------------------------------ #
    def subscribe(self, callback: RosterObserver) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: RosterObserver) -> None:
        try:
            self._observers.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------ #
    #  Operations                                                        #
    # ------------------------------------------------------------------ #
    def set_desired_count(self, n: int) -> RosterState:
        """
        Grow or shrink the roster to exactly *n* guests.

        New guests start as {full_name: "", sex: male, nationality: ""};
        survivors keep their values. Dropped guests are discarded for good.

        Raises:
            InvalidCountError: n is not one of the allowed counts
        """
        self._check_usable()
        if isinstance(n, bool) or not isinstance(n, int) or n not in self._allowed:
            raise InvalidCountError(n, self._allowed)

        before = len(self._store)
        with self._guard():
            while len(self._store) < n:
                self._store.append(GuestEntry())
            while len(self._store) > n:
                self._store.pop_tail()
            self._desired_count = n
            self._requires = self.recompute_requirement()

        if before != n:
            logger.debug("Roster resized %d -> %d (certificate required: %s)", before, n, self._requires)
            self._publish("resized")
        return self.state()

    def update_guest_field(self, index: int, field: str, value: Any) -> RosterState:
        """
        Set one field of one guest.

        Raises:
            IndexOutOfRangeError: no guest at *index*
            UnknownGuestFieldError: *field* is not a guest field
            InvalidGuestFieldValueError: *value* does not fit the field
        """
        self._check_usable()
        size = len(self._store)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            raise IndexOutOfRangeError(index, size)
        if field not in GUEST_FIELDS:
            raise UnknownGuestFieldError(field)

        value = self._coerce(field, value)
        entry = self._store[index]
        if getattr(entry, field) == value:
            return self.state()

        with self._guard():
            setattr(entry, field, value)
            self._requires = self.recompute_requirement()

        logger.debug("Guest %d: %s updated (certificate required: %s)", index, field, self._requires)
        self._publish("guest_updated")
        return self.state()

    def recompute_requirement(self) -> bool:
        """Derive the marriage certificate flag from the current roster."""
        return requires_marriage_certificate(self._store.snapshot(), self._token)

    def close(self) -> None:
        """Drop all observers. The roster can no longer be changed."""
        self._observers.clear()
        self._closed = True

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _check_usable(self) -> None:
        if self._closed:
            raise RosterClosedError("Roster has been closed")
        if self._busy:
            raise ReentrantUpdateError("Roster cannot be changed from inside a roster callback")

    @staticmethod
    def _coerce(field: str, value: Any) -> Any:
        if field == "sex":
            try:
                return Sex(value)
            except ValueError:
                raise InvalidGuestFieldValueError(f"Unknown sex {value!r}") from None
        if not isinstance(value, str):
            raise InvalidGuestFieldValueError(f"{field} must be text, got {type(value).__name__}")
        return value

    def _guard(self) -> "_BusyGuard":
        return _BusyGuard(self)

    def _publish(self, event_type: RosterEventType) -> None:
        if not self._observers:
            return
        event = RosterChangedEvent(type=event_type, state=self.state(), ts_utc=datetime.now(timezone.utc))
        with self._guard():
            for callback in list(self._observers):
                callback(event)


class _BusyGuard:
    """Marks the synchronizer busy for the duration of a block."""

    def __init__(self, owner: RosterSynchronizer) -> None:
        self._owner = owner

    def __enter__(self) -> None:
        self._owner._busy = True

    def __exit__(self, *exc) -> None:
        self._owner._busy = False
