"""Logging configuration for shipment_qr."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


class SafeRotatingFileHandler(RotatingFileHandler):
    """Rotating handler that keeps writing when the log file is locked."""

    def doRollover(self) -> None:  # noqa: N802 - logging API name
        try:
            super().doRollover()
        except PermissionError:
            if self.stream is None:
                self.stream = self._open()


def setup_logging(log_dir: Path, level: int = logging.INFO) -> logging.Logger:
    """Configure logging to console and rotating file."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "shipment_qr.log"

    logger = logging.getLogger("shipment_qr")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    file_handler = SafeRotatingFileHandler(
        log_path,
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
