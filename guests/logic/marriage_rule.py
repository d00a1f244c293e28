"""
Marriage certificate derivation.

A single pure function over a roster snapshot. The boolean expression is kept
exactly as the registration rules state it: a Moroccan woman with any man, or
a Moroccan man with a non-Moroccan woman. Men alone never trigger it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..models.guest_entry import GuestEntry, Sex

DEFAULT_MOROCCAN_TOKEN = "Morocco"


@dataclass(frozen=True)
class RosterComposition:
    """Presence flags over the roster, compared verbatim against the token."""

    moroccan_female: bool = False
    moroccan_male: bool = False
    non_moroccan_female: bool = False
    non_moroccan_male: bool = False

    @classmethod
    def of(cls, guests: Iterable[GuestEntry], moroccan_token: str = DEFAULT_MOROCCAN_TOKEN) -> "RosterComposition":
        mf = mm = nf = nm = False
        for guest in guests:
            moroccan = guest.nationality == moroccan_token
            female = guest.sex == Sex.FEMALE
            male = guest.sex == Sex.MALE
            mf = mf or (moroccan and female)
            mm = mm or (moroccan and male)
            nf = nf or (not moroccan and female)
            nm = nm or (not moroccan and male)
        return cls(moroccan_female=mf, moroccan_male=mm, non_moroccan_female=nf, non_moroccan_male=nm)

    def requires_marriage_certificate(self) -> bool:
        return (
            (self.moroccan_female and self.moroccan_male)
            or (self.moroccan_female and self.non_moroccan_male)
            or (self.moroccan_male and self.non_moroccan_female)
        )


def requires_marriage_certificate(guests: Iterable[GuestEntry],
                                  moroccan_token: str = DEFAULT_MOROCCAN_TOKEN) -> bool:
    """True when the roster needs a marriage certificate. Never mutates *guests*."""
    return RosterComposition.of(guests, moroccan_token).requires_marriage_certificate()
