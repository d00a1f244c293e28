import csv
import logging
from pathlib import Path

from core.config.config_service import config_service

logger = logging.getLogger(__name__)

LOCALE_TRACK_MISSING_KEYS = True

LABELS_TSV_PATH = Path(__file__).resolve().parent / "labels.tsv"


class TranslationManager:
    """
    Manages translations from one or more labels.tsv files
    (first column: key, remaining columns: one per language).
    Missing keys are logged once per (key, language).
    """

    def __init__(self):
        self.translations = {}  # {lang: {label: text}}
        self.coverage = {}      # {lang: float}
        self.file_path: Path | None = None
        self._missing_keys_logged = set()

    def load_files(self, file_paths: list[Path]) -> None:
        """Loads and merges several translation files."""
        self.translations = {}
        self.coverage = {}
        self.file_path = None
        all_labels: set[str] = set()

        for file_path in file_paths:
            if self.file_path is None:
                self.file_path = file_path.resolve()
            with open(file_path, encoding="utf-8") as f:
                reader = csv.reader(f, delimiter="\t")
                header = next(reader)
                langs = header[1:]
                for lang in langs:
                    self.translations.setdefault(lang, {})

                for row in reader:
                    if not row:
                        continue
                    label = row[0]
                    all_labels.add(label)
                    for i, lang in enumerate(langs):
                        text = row[i + 1] if i + 1 < len(row) else ""
                        self.translations[lang][label] = text

        row_count = len(all_labels)
        for lang in self.translations:
            translated = sum(bool(v) for v in self.translations[lang].values())
            self.coverage[lang] = translated / row_count if row_count else 1.0

    def load_file(self, file_path: Path) -> None:
        self.load_files([file_path])

    def available_languages(self) -> list[str]:
        return list(self.translations.keys())

    def t(self, label: str, lang: str) -> str:
        """
        Returns the translation, or the label itself as fallback.
        """
        value = self.translations.get(lang, {}).get(label)
        if value:
            return value

        if LOCALE_TRACK_MISSING_KEYS and (label, lang) not in self._missing_keys_logged:
            logger.debug("Missing translation key '%s' (lang=%s)", label, lang)
            self._missing_keys_logged.add((label, lang))

        return label


# Global instance
translations = TranslationManager()
if LABELS_TSV_PATH.exists():
    translations.load_file(LABELS_TSV_PATH)


def T(label: str) -> str:
    """Translate *label* into the configured UI language."""
    return translations.t(label, config_service.general.language)
