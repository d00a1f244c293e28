"""
core/tests/test_config_service.py

Layer precedence and typed sections of the ConfigService.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        self.defaults = self.base / "defaults.ini"
        self.machine = self.base / "config.ini"
        self.user = self.base / "user.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, environ=None) -> ConfigService:
        return ConfigService(defaults_ini=self.defaults, machine_ini=self.machine,
                             user_ini=self.user, environ=environ or {})

    def test_embedded_defaults(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.roster.max_guests, 6)
        self.assertEqual(cfg.roster.moroccan_token, "Morocco")
        self.assertEqual(cfg.signature.width_wide, 500)
        self.assertEqual(cfg.signature.height, 200)
        self.assertEqual(cfg.uploads.max_files, 5)
        self.assertIsInstance(cfg.roster.countries_file, Path)
        self.assertEqual(cfg.meta_source("Roster", "max_guests")["layer"], "code")

    def test_precedence(self) -> None:
        self.defaults.write_text("[Roster]\nmax_guests = 4\nmin_guests = 2\n", encoding="utf-8")
        self.machine.write_text("[Roster]\nmax_guests = 5\n", encoding="utf-8")
        self.user.write_text("[Logging]\nlevel = DEBUG\n", encoding="utf-8")
        cfg = self._service({"GUESTREG_ROSTER__MIN_GUESTS": "3", "GUESTREG_ROSTER__MAX_GUESTS": "2"})

        self.assertEqual(cfg.roster.max_guests, 5)
        self.assertEqual(cfg.meta_source("Roster", "max_guests")["layer"], "machine")
        self.assertEqual(cfg.roster.min_guests, 3)
        self.assertEqual(cfg.meta_source("Roster", "min_guests")["layer"], "env")
        self.assertEqual(cfg.logging.level, "DEBUG")

    def test_env_keys_without_section_are_ignored(self) -> None:
        cfg = self._service({"GUESTREG_LEVEL": "DEBUG", "OTHER_LOGGING__LEVEL": "DEBUG"})
        self.assertEqual(cfg.logging.level, "INFO")

    def test_get_with_cast(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.get("Signature", "stroke_width", cast=int), 2)
        self.assertEqual(cfg.get("Signature", "stroke_color"), "#ffffff")
        self.assertIsNone(cfg.get("Signature", "missing"))

    def test_reload_picks_up_changes(self) -> None:
        cfg = self._service()
        self.machine.write_text("[Uploads]\nmax_files = 9\n", encoding="utf-8")
        self.assertEqual(cfg.uploads.max_files, 5)
        cfg.reload()
        self.assertEqual(cfg.uploads.max_files, 9)


if __name__ == "__main__":
    unittest.main()
