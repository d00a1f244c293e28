"""TSV label loading and lookup fallbacks."""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.i18n.translation_manager import TranslationManager, translations


class TestTranslationManager(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tsv = Path(self._tmp.name) / "labels.tsv"
        self.tsv.write_text(
            "key\tfr\ten\n"
            "common.submit\tSoumettre\tSubmit\n"
            "common.clear\tEffacer\t\n",
            encoding="utf-8",
        )
        self.tm = TranslationManager()
        self.tm.load_file(self.tsv)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_lookup(self) -> None:
        self.assertEqual(self.tm.t("common.submit", "fr"), "Soumettre")
        self.assertEqual(self.tm.t("common.submit", "en"), "Submit")

    def test_missing_text_falls_back_to_key(self) -> None:
        self.assertEqual(self.tm.t("common.clear", "en"), "common.clear")
        self.assertEqual(self.tm.t("nope", "fr"), "nope")

    def test_coverage_and_languages(self) -> None:
        self.assertEqual(self.tm.available_languages(), ["fr", "en"])
        self.assertEqual(self.tm.coverage["fr"], 1.0)
        self.assertEqual(self.tm.coverage["en"], 0.5)

    def test_bundled_labels_have_french_and_english(self) -> None:
        self.assertIn("fr", translations.available_languages())
        self.assertIn("en", translations.available_languages())
        self.assertEqual(translations.t("registration.submit", "fr"), "Soumettre la Demande")


if __name__ == "__main__":
    unittest.main()
