"""CLI for shipment_qr."""

from __future__ import annotations

import json
import re
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from qrcode.exceptions import DataOverflowError

from .certificate import CertificateNotReadyError, build_certificate_codes
from .certificate_pdf import render_certificate_pdf
from .codec import classify_payload, decode_payload
from .config import Config, load_config
from .logging_utils import setup_logging
from .models import EquipmentRecord, ShipmentRecord
from .paths import config_path, logs_dir, output_dir
from .project import init_project, load_project_config
from .qr_image import QrOptions, save_qr_png
from .records_io import RecordsFileError, load_records, records_to_dict

app = typer.Typer(help="shipment_qr CLI: certificate QR payloads and rendering")


def _start() -> Config:
    init_project()
    config = load_project_config()
    setup_logging(logs_dir(), config.logging_level)
    return config


def _slug(value: str) -> str:
    return re.sub(r"[^0-9A-Za-z]+", "-", value).strip("-")


def _load_records_or_exit(file: Path) -> tuple[ShipmentRecord, list[EquipmentRecord]]:
    try:
        return load_records(file)
    except (RecordsFileError, FileNotFoundError) as exc:
        typer.secho(f"Error reading records: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command()
def init() -> None:
    """Create folders and default config if missing."""
    _start()
    typer.echo("Initialization complete.")


@app.command("validate")
def validate_cmd() -> None:
    """Validate config.yml."""
    try:
        load_config(config_path())
    except (ValidationError, FileNotFoundError, yaml.YAMLError) as exc:
        typer.secho(f"Validation error: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo("OK")


@app.command("show-config")
def show_config() -> None:
    """Print parsed config."""
    config = load_project_config()
    typer.echo(json.dumps(config.model_dump(), indent=2, ensure_ascii=False))


@app.command("encode")
def encode(
    file: Path = typer.Argument(..., help="YAML/JSON file with shipment and equipment records."),
    rows: bool = typer.Option(False, "--rows", help="Include one payload per equipment row."),
) -> None:
    """Print the QR payloads for a records file."""
    shipment, equipment = _load_records_or_exit(file)
    codes = build_certificate_codes(shipment, equipment)
    payload = codes.as_dict()
    if not rows:
        payload.pop("rows")
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("decode")
def decode(payload: str = typer.Argument(..., help="Scanned QR text.")) -> None:
    """Decode a scanned payload into records."""
    decoded = decode_payload(payload)
    if not decoded.ok:
        typer.secho("Unreadable code.", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    result = {"type": decoded.kind.value, **records_to_dict(decoded.shipment, decoded.equipment)}
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


@app.command("classify")
def classify(payload: str = typer.Argument(..., help="Scanned QR text.")) -> None:
    """Print the payload type: shipment, equipment or unknown."""
    typer.echo(classify_payload(payload).value)


@app.command("qr")
def qr(
    payload: str = typer.Argument(..., help="Payload text to encode."),
    out: Path | None = typer.Option(None, "--out", help="Output PNG path."),
) -> None:
    """Render a payload as a PNG QR image."""
    config = _start()
    target = out or output_dir() / "qr.png"
    try:
        save_qr_png(payload, target, QrOptions.from_config(config.qr))
    except (DataOverflowError, ValueError) as exc:
        typer.secho(f"QR rendering failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(str(target))


@app.command("certificate")
def certificate(
    file: Path = typer.Argument(..., help="YAML/JSON file with shipment and equipment records."),
    out: Path | None = typer.Option(None, "--out", help="Output PDF path."),
) -> None:
    """Render the printable certificate PDF."""
    config = _start()
    shipment, equipment = _load_records_or_exit(file)
    target = out or output_dir() / f"certificate-{_slug(shipment.shipment_number) or 'draft'}.pdf"
    font_path = Path(config.certificate_font_path) if config.certificate_font_path else None
    try:
        render_certificate_pdf(
            shipment,
            equipment,
            target,
            QrOptions.from_config(config.qr),
            title=config.certificate_title,
            font_path=font_path,
        )
    except CertificateNotReadyError as exc:
        typer.secho(f"Certificate not ready: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except (DataOverflowError, ValueError, FileNotFoundError) as exc:
        typer.secho(f"Certificate rendering failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(str(target))


@app.callback()
def main() -> None:
    """Global options for shipment_qr."""
