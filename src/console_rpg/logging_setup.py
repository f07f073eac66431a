"""Logging configuration: rich console output plus a plain log file."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: dict[str, Any]) -> None:
    """Install handlers on the ``console_rpg`` logger.

    The console handler only shows warnings by default so that log lines
    do not interleave with the game screen; the file gets everything
    from ``file_level`` up.
    """
    cfg = config.get("logging", {})
    logger = logging.getLogger("console_rpg")
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console = RichHandler(rich_tracebacks=True, show_path=False)
    console.setLevel(cfg.get("level", "WARNING").upper())
    logger.addHandler(console)

    log_file = cfg.get("file")
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(cfg.get("file_level", "INFO").upper())
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
