"""Configuration model and helpers.

Data contract:
- qr.error_correction: QR error correction level (L, M, Q or H)
- qr.border: quiet zone around the code, in modules
- qr.width_px: rendered image width in pixels
- qr.fill_color / qr.back_color: module and background colors
- certificate_title: heading printed on the certificate PDF
- certificate_font_path: TrueType font used on the certificate; when unset a
  Hebrew-capable system font is looked up
- log_level: logging level name for CLI runs
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

ERROR_CORRECTION_LEVELS = ("L", "M", "Q", "H")


class QrConfig(BaseModel):
    """QR image rendering settings."""

    error_correction: str = Field(default="L")
    border: int = Field(default=1, ge=0)
    width_px: int = Field(default=150, ge=21)
    fill_color: str = Field(default="#000000")
    back_color: str = Field(default="#ffffff")

    @field_validator("error_correction")
    @classmethod
    def _validate_error_correction(cls, value: str) -> str:
        normalized = str(value or "").strip().upper()
        if normalized not in ERROR_CORRECTION_LEVELS:
            raise ValueError("error_correction must be one of: L, M, Q, H")
        return normalized


class Config(BaseModel):
    """Root configuration model for shipment_qr."""

    qr: QrConfig = Field(default_factory=QrConfig)
    certificate_title: str = Field(default="Shipment Certificate", min_length=1)
    certificate_font_path: Optional[str] = Field(default=None)
    log_level: str = Field(default="info")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"debug", "info", "warning", "error"}:
            raise ValueError("log_level must be one of: debug, info, warning, error")
        return normalized

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def default_config() -> Config:
    """Return default configuration values."""
    return Config()


def load_config(path: Path) -> Config:
    """Load and validate config.yml from disk."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Config.model_validate(data)


def save_config(config: Config, path: Path) -> None:
    """Save config.yml to disk."""
    payload = config.model_dump()
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
