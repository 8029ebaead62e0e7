"""Project path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def repo_root() -> Path:
    """Return the project root directory based on package location."""
    override = os.environ.get("SHIPMENT_QR_ROOT")
    if override:
        return Path(override).resolve()
    return Path(__file__).resolve().parents[2]


def data_dir() -> Path:
    """Return the data directory path."""
    return repo_root() / "data"


def config_path() -> Path:
    """Return the default config.yml path."""
    return repo_root() / "config.yml"


def logs_dir() -> Path:
    return data_dir() / "logs"


def output_dir() -> Path:
    """Return the default directory for rendered QR images and PDFs."""
    return data_dir() / "output"
