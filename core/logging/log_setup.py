"""
core/logging/log_setup.py
=========================

Wires the stdlib ``logging`` root logger from the ``[Logging]`` config section.

Modules only ever call ``logging.getLogger(__name__)``; handlers are installed
once here by the application entry point.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.config.config_service import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_HANDLER_MARK = "_guestreg_handler"


def configure_logging(cfg: LoggingConfig, *, root: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Install console (and optional rotating file) handlers on the root logger.

    Calling it again replaces the handlers installed by a previous call, so a
    config reload does not duplicate output.
    """
    root = root or logging.getLogger()
    level = logging.getLevelName(str(cfg.level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARK, True)
    root.addHandler(console)

    if cfg.log_file:
        path = Path(cfg.log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        root.addHandler(file_handler)

    return root
