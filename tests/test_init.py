from pathlib import Path

import pytest
from pydantic import ValidationError

from shipment_qr.config import Config, QrConfig, default_config, load_config, save_config
from shipment_qr.paths import config_path, data_dir, logs_dir, output_dir
from shipment_qr.project import init_project, load_project_config


def test_init_creates_files(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SHIPMENT_QR_ROOT", str(tmp_path))

    init_project()

    assert config_path() == tmp_path / "config.yml"
    assert config_path().exists()
    assert logs_dir().exists()
    assert output_dir().exists()
    assert data_dir() == tmp_path / "data"


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    config = Config(qr=QrConfig(error_correction="q", width_px=220), certificate_title="Cert")
    save_config(config, path)

    loaded = load_config(path)

    assert loaded.qr.error_correction == "Q"
    assert loaded.qr.width_px == 220
    assert loaded.certificate_title == "Cert"


def test_config_defaults_match_qr_generator_settings() -> None:
    config = default_config()
    assert config.qr.error_correction == "L"
    assert config.qr.border == 1
    assert config.qr.width_px == 150
    assert config.logging_level == 20


def test_config_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        QrConfig(error_correction="Z")
    with pytest.raises(ValidationError):
        QrConfig(width_px=10)
    with pytest.raises(ValidationError):
        Config(log_level="verbose")


def test_load_project_config_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SHIPMENT_QR_ROOT", str(tmp_path))
    assert load_project_config() == default_config()
