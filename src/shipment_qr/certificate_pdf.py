"""Printable shipment certificate rendered with reportlab.

Field text is drawn with a TrueType font so Hebrew values render, and is
reordered for display with the Unicode bidi algorithm.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from bidi.algorithm import get_display
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .certificate import build_certificate_codes, require_ready
from .models import EquipmentRecord, ShipmentRecord
from .qr_image import QrOptions, render_qr_image

logger = logging.getLogger("shipment_qr.certificate_pdf")

MARGIN = 15 * mm
HEADER_QR_SIZE = 32 * mm
ROW_QR_SIZE = 14 * mm
ROW_HEIGHT = 16 * mm

# Looked up in order when no font is configured.
FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansHebrew-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
)

SHIPMENT_LABELS = (
    ("shipment_number", "Shipment No."),
    ("customer", "Customer"),
    ("supply_date", "Supply date"),
    ("poc_name", "POC name"),
    ("poc_phone", "POC phone"),
)

# (field, header, column width)
EQUIPMENT_COLUMNS = (
    ("row_num", "#", 8 * mm),
    ("manufacturer_num", "Mfr No.", 18 * mm),
    ("manufacturer_name", "Manufacturer", 22 * mm),
    ("equipment_version", "Version", 16 * mm),
    ("idf_catalog", "Catalog", 20 * mm),
    ("serial_num", "Serial", 20 * mm),
    ("purchase_qty", "Purch.", 12 * mm),
    ("test_qty", "Test", 10 * mm),
    ("purchase_order", "PO", 18 * mm),
)


@dataclass(frozen=True)
class CertificateFonts:
    regular: str
    bold: str


def _register(path: Path) -> str:
    name = path.stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(path)))
    return name


def resolve_fonts(font_path: Path | None = None) -> CertificateFonts:
    """Register the certificate font and its ``-Bold`` sibling when present.

    A configured path must exist. Without one, the first FONT_CANDIDATES entry
    found is used; if none is installed the standard Helvetica faces are
    returned and non-Latin text will not render.
    """
    if font_path is not None:
        if not font_path.exists():
            raise FileNotFoundError(f"Certificate font not found: {font_path}")
        path = font_path
    else:
        path = next((Path(item) for item in FONT_CANDIDATES if Path(item).exists()), None)
        if path is None:
            logger.warning("No Unicode TrueType font found; falling back to Helvetica")
            return CertificateFonts(regular="Helvetica", bold="Helvetica-Bold")

    regular = _register(path)
    bold_path = path.with_name(f"{path.stem}-Bold{path.suffix}")
    bold = _register(bold_path) if bold_path.exists() else regular
    return CertificateFonts(regular=regular, bold=bold)


def _visual(text: str) -> str:
    return get_display(text) if text else text


def _draw_qr(pdf: canvas.Canvas, payload: str, x: float, y: float, size: float, options: QrOptions) -> None:
    image = render_qr_image(payload, options)
    pdf.drawImage(ImageReader(image), x, y, width=size, height=size)


def _draw_header(
    pdf: canvas.Canvas,
    title: str,
    shipment: ShipmentRecord,
    shipment_payload: str,
    options: QrOptions,
    fonts: CertificateFonts,
) -> float:
    width, height = A4
    top = height - MARGIN

    pdf.setFont(fonts.bold, 16)
    pdf.drawString(MARGIN, top - 6 * mm, _visual(title))

    pdf.setFont(fonts.regular, 10)
    y = top - 16 * mm
    for name, label in SHIPMENT_LABELS:
        pdf.drawString(MARGIN, y, _visual(f"{label}: {getattr(shipment, name)}"))
        y -= 6 * mm

    _draw_qr(
        pdf,
        shipment_payload,
        width - MARGIN - HEADER_QR_SIZE,
        top - HEADER_QR_SIZE,
        HEADER_QR_SIZE,
        options,
    )
    return min(y, top - HEADER_QR_SIZE) - 8 * mm


def _draw_table_header(pdf: canvas.Canvas, y: float, fonts: CertificateFonts) -> float:
    pdf.setFont(fonts.bold, 8)
    x = MARGIN
    for _, header, col_width in EQUIPMENT_COLUMNS:
        pdf.drawString(x, y, header)
        x += col_width
    pdf.drawString(x, y, "QR")
    pdf.line(MARGIN, y - 2 * mm, A4[0] - MARGIN, y - 2 * mm)
    pdf.setFont(fonts.regular, 8)
    return y - 2 * mm


def _draw_row(
    pdf: canvas.Canvas,
    row: EquipmentRecord,
    payload: str,
    top: float,
    options: QrOptions,
) -> None:
    text_y = top - ROW_HEIGHT / 2
    x = MARGIN
    for name, _, col_width in EQUIPMENT_COLUMNS:
        pdf.drawString(x, text_y, _visual(getattr(row, name)))
        x += col_width
    _draw_qr(pdf, payload, x, top - ROW_QR_SIZE - 1 * mm, ROW_QR_SIZE, options)


def render_certificate_pdf(
    shipment: ShipmentRecord,
    rows: Sequence[EquipmentRecord],
    output_path: Path,
    options: QrOptions | None = None,
    title: str = "Shipment Certificate",
    font_path: Path | None = None,
) -> Path:
    """Render the certificate with shipment, aggregate and per-row QR codes.

    Raises CertificateNotReadyError when required data is missing and
    QrCapacityError when a payload is too long for a QR code.
    """
    require_ready(shipment, rows)
    opts = options or QrOptions()
    fonts = resolve_fonts(font_path)
    codes = build_certificate_codes(shipment, rows)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    pdf = canvas.Canvas(str(output_path), pagesize=A4)
    pdf.setTitle(title)

    y = _draw_header(pdf, title, shipment, codes.shipment_payload, opts, fonts)
    y = _draw_table_header(pdf, y, fonts)

    for row, payload in zip(rows, codes.row_payloads):
        if y - ROW_HEIGHT < MARGIN:
            pdf.showPage()
            y = _draw_table_header(pdf, A4[1] - MARGIN, fonts)
        _draw_row(pdf, row, payload, y, opts)
        y -= ROW_HEIGHT

    if y - HEADER_QR_SIZE - 8 * mm < MARGIN:
        pdf.showPage()
        y = A4[1] - MARGIN
    pdf.setFont(fonts.bold, 10)
    pdf.drawString(MARGIN, y - 6 * mm, "Equipment list")
    _draw_qr(pdf, codes.equipment_payload, MARGIN, y - 8 * mm - HEADER_QR_SIZE, HEADER_QR_SIZE, opts)

    pdf.showPage()
    pdf.save()
    logger.info("Certificate saved to %s (%d equipment rows)", output_path, len(rows))
    return output_path
