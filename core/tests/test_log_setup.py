"""configure_logging handler wiring."""
from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from core.config.config_service import LoggingConfig
from core.logging.log_setup import configure_logging


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger("guestreg-test-root")
        self.root.propagate = False

    def tearDown(self) -> None:
        for handler in list(self.root.handlers):
            self.root.removeHandler(handler)
            handler.close()

    def test_level_and_console_handler(self) -> None:
        configure_logging(LoggingConfig(level="debug"), root=self.root)
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(len(self.root.handlers), 1)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(LoggingConfig(level="chatty"), root=self.root)
        self.assertEqual(self.root.level, logging.INFO)

    def test_reconfigure_does_not_duplicate(self) -> None:
        configure_logging(LoggingConfig(), root=self.root)
        configure_logging(LoggingConfig(), root=self.root)
        self.assertEqual(len(self.root.handlers), 1)

    def test_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "app.log"
            configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)), root=self.root)
            self.assertEqual(len(self.root.handlers), 2)
            self.root.info("hello")
            for handler in self.root.handlers:
                handler.flush()
            self.assertIn("hello", log_file.read_text(encoding="utf-8"))
            for handler in list(self.root.handlers):
                self.root.removeHandler(handler)
                handler.close()


if __name__ == "__main__":
    unittest.main()
