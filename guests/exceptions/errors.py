"""Guest roster exceptions."""
from __future__ import annotations


class GuestRosterError(Exception):
    """Base exception for the guest roster feature."""


class InvalidCountError(GuestRosterError, ValueError):
    """Raised when a desired guest count is outside the permitted set."""

    def __init__(self, count: object, allowed: tuple[int, ...]) -> None:
        super().__init__(f"Guest count {count!r} is not one of {list(allowed)}")
        self.count = count
        self.allowed = allowed


class IndexOutOfRangeError(GuestRosterError, IndexError):
    """Raised when a field update targets a guest that does not exist."""

    def __init__(self, index: object, size: int) -> None:
        super().__init__(f"Guest index {index!r} out of range for roster of {size}")
        self.index = index
        self.size = size


class UnknownGuestFieldError(GuestRosterError, KeyError):
    """Raised when a field update names a field a guest does not have."""


class InvalidGuestFieldValueError(GuestRosterError, ValueError):
    """Raised when a field value cannot be stored (e.g. unknown sex)."""


class ReentrantUpdateError(GuestRosterError, RuntimeError):
    """Raised when the roster is mutated from inside its own change callback."""


class RosterClosedError(GuestRosterError, RuntimeError):
    """Raised when a closed roster is used."""
