"""Project bootstrap helpers."""

from __future__ import annotations

from .config import Config, default_config, load_config, save_config
from .paths import config_path, data_dir, logs_dir, output_dir


def ensure_dirs() -> None:
    """Ensure required directory structure exists."""
    for path in [data_dir(), logs_dir(), output_dir()]:
        path.mkdir(parents=True, exist_ok=True)


def init_project() -> None:
    """Initialize folders and config if missing."""
    ensure_dirs()

    cfg_path = config_path()
    if not cfg_path.exists():
        save_config(default_config(), cfg_path)


def load_project_config() -> Config:
    """Return config.yml if present, otherwise defaults."""
    cfg_path = config_path()
    if not cfg_path.exists():
        return default_config()
    return load_config(cfg_path)
