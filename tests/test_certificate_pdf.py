from pathlib import Path

import pytest
from bidi.algorithm import get_display
from pypdf import PdfReader
from reportlab.pdfbase import pdfmetrics

from shipment_qr import certificate_pdf
from shipment_qr.certificate import CertificateNotReadyError
from shipment_qr.certificate_pdf import FONT_CANDIDATES, CertificateFonts, render_certificate_pdf, resolve_fonts
from shipment_qr.models import EquipmentRecord, ShipmentRecord

SHIPMENT = ShipmentRecord(
    shipment_number="8564231",
    customer="ACME",
    supply_date="08/01/2026",
    poc_name="Dana",
    poc_phone="050-0000000",
)


def _rows(count: int) -> list[EquipmentRecord]:
    return [
        EquipmentRecord(
            row_num=str(idx),
            manufacturer_num=str(100 + idx),
            manufacturer_name="SONY",
            serial_num=f"SN{idx}",
            purchase_qty="1",
            test_qty="1",
            id=idx,
        )
        for idx in range(1, count + 1)
    ]


def test_render_certificate_pdf_writes_fields(tmp_path: Path) -> None:
    output = render_certificate_pdf(SHIPMENT, _rows(2), tmp_path / "out" / "cert.pdf", title="Delivery")

    assert output.exists()
    reader = PdfReader(str(output))
    text = "\n".join(page.extract_text() or "" for page in reader.pages)
    assert "Delivery" in text
    assert "8564231" in text
    assert "ACME" in text
    assert "SN2" in text


def test_render_certificate_pdf_paginates_long_tables(tmp_path: Path) -> None:
    output = render_certificate_pdf(SHIPMENT, _rows(30), tmp_path / "cert.pdf")
    reader = PdfReader(str(output))
    assert len(reader.pages) > 1


def test_render_certificate_pdf_requires_ready_records(tmp_path: Path) -> None:
    with pytest.raises(CertificateNotReadyError):
        render_certificate_pdf(ShipmentRecord(customer="ACME"), _rows(1), tmp_path / "cert.pdf")
    assert not (tmp_path / "cert.pdf").exists()


def _unicode_font() -> Path:
    font = next((Path(item) for item in FONT_CANDIDATES if Path(item).exists()), None)
    if font is None:
        pytest.skip("no Hebrew-capable TrueType font installed")
    return font


def test_render_certificate_pdf_prints_hebrew_fields(tmp_path: Path) -> None:
    font = _unicode_font()
    shipment = ShipmentRecord("345", "לקוח א", "07/01/2026", "דני כהן", "")
    rows = [EquipmentRecord(row_num="1", manufacturer_name="סוני", test_qty="1")]

    output = render_certificate_pdf(shipment, rows, tmp_path / "cert.pdf", font_path=font)

    text = "\n".join(page.extract_text() or "" for page in PdfReader(str(output)).pages)
    assert "■" not in text
    assert get_display("לקוח א") in text or "לקוח א" in text
    assert set("דני כהן סוני") <= set(text)


def test_resolve_fonts_registers_configured_font() -> None:
    font = _unicode_font()
    fonts = resolve_fonts(font)
    assert fonts.regular == font.stem
    assert fonts.regular in pdfmetrics.getRegisteredFontNames()


def test_resolve_fonts_rejects_missing_configured_font(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        resolve_fonts(tmp_path / "missing.ttf")


def test_resolve_fonts_falls_back_to_helvetica(monkeypatch) -> None:
    monkeypatch.setattr(certificate_pdf, "FONT_CANDIDATES", ())
    assert resolve_fonts() == CertificateFonts(regular="Helvetica", bold="Helvetica-Bold")
