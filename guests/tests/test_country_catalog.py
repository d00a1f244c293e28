"""Country reference list loading and lookups."""
from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from guests.logic.country_catalog import Country, CountryCatalog


class TestCountryCatalog(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, payload: object) -> Path:
        path = self.dir / "countries.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_bundled_list_contains_morocco(self) -> None:
        catalog = CountryCatalog()
        self.assertEqual(catalog.find("Morocco"), Country(name="Morocco", iso_code="MA"))
        self.assertGreater(len(catalog.lookup_countries()), 50)

    def test_sorted_by_name(self) -> None:
        path = self._write([{"name": "Spain", "iso_code": "ES"}, {"name": "France", "iso_code": "FR"}])
        names = [c.name for c in CountryCatalog(path).lookup_countries()]
        self.assertEqual(names, ["France", "Spain"])

    def test_suggest_prefix_case_insensitive(self) -> None:
        path = self._write([
            {"name": "Morocco", "iso_code": "MA"},
            {"name": "Monaco", "iso_code": "MC"},
            {"name": "Mali", "iso_code": "ML"},
        ])
        catalog = CountryCatalog(path)
        self.assertEqual([c.iso_code for c in catalog.suggest("mo")], ["MC", "MA"])
        self.assertEqual(len(catalog.suggest("m", limit=2)), 2)
        self.assertEqual(catalog.suggest("x"), [])

    def test_missing_file_degrades_to_empty(self) -> None:
        catalog = CountryCatalog(self.dir / "nope.json")
        with self.assertLogs("guests.logic.country_catalog", level="WARNING"):
            self.assertEqual(catalog.lookup_countries(), [])
        self.assertIsNone(catalog.find("Morocco"))

    def test_malformed_file_degrades_to_empty(self) -> None:
        path = self._write([{"label": "Morocco"}])
        with self.assertLogs("guests.logic.country_catalog", level="WARNING"):
            self.assertEqual(CountryCatalog(path).lookup_countries(), [])

    def test_reload_rereads_file(self) -> None:
        path = self._write([{"name": "France", "iso_code": "FR"}])
        catalog = CountryCatalog(path)
        self.assertEqual(len(catalog.lookup_countries()), 1)
        self._write([{"name": "France", "iso_code": "FR"}, {"name": "Spain", "iso_code": "ES"}])
        self.assertEqual(len(catalog.lookup_countries()), 1)
        catalog.reload()
        self.assertEqual(len(catalog.lookup_countries()), 2)


if __name__ == "__main__":
    unittest.main()
