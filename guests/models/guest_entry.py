# guests/models/guest_entry.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


# Field names accepted by RosterSynchronizer.update_guest_field
GUEST_FIELDS: tuple[str, ...] = ("full_name", "sex", "nationality")


@dataclass
class GuestEntry:
    """
    One guest of the roster. Identity is the position in the roster, there is
    no stable key.

    Attributes:
        full_name (str): Name as written on the identification document.
        sex (Sex): Declared sex.
        nationality (str): Free text, normally a country name from the catalog.
    """
    full_name: str = ""
    sex: Sex = Sex.MALE
    nationality: str = ""

    def copy(self) -> "GuestEntry":
        return replace(self)

    def to_payload(self) -> dict[str, str]:
        return {
            "fullName": self.full_name,
            "sex": self.sex.value,
            "nationality": self.nationality,
        }
