"""
CountryCatalog
--------------
Country reference list used to autocomplete the nationality field.

The list is read from a JSON file (array of {"name", "iso_code"} objects).
A missing or broken file is not an error for the form: lookups then return an
empty list and the nationality stays free text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

COUNTRIES_JSON = Path(__file__).resolve().parents[1] / "data" / "countries.json"


@dataclass(frozen=True)
class Country:
    name: str
    iso_code: str


class CountryCatalog:
    """Lazily loaded, cached country list."""

    def __init__(self, path: str | Path = COUNTRIES_JSON) -> None:
        self._path = Path(path)
        self._countries: Optional[List[Country]] = None

    def lookup_countries(self) -> List[Country]:
        """All countries, sorted by name; empty when the list is unavailable."""
        if self._countries is None:
            self._countries = self._load()
        return list(self._countries)

    def find(self, name: str) -> Optional[Country]:
        for country in self.lookup_countries():
            if country.name == name:
                return country
        return None

    def suggest(self, prefix: str, limit: int = 10) -> List[Country]:
        """Countries whose name starts with *prefix* (case-insensitive)."""
        needle = (prefix or "").strip().casefold()
        hits = [c for c in self.lookup_countries() if c.name.casefold().startswith(needle)]
        return hits[:max(0, limit)]

    def reload(self) -> None:
        self._countries = None

    # --- Internal helpers ---------------------------------------------------

    def _load(self) -> List[Country]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            countries = [Country(name=str(item["name"]), iso_code=str(item["iso_code"])) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as ex:
            logger.warning("Country list unavailable (%s): %s; nationality stays free text", self._path, ex)
            return []
        countries.sort(key=lambda c: c.name.casefold())
        return countries
