"""QR image rendering for certificate payloads."""

from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError

from .config import QrConfig

logger = logging.getLogger("shipment_qr.qr_image")

_ERROR_CORRECTION = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


@dataclass(frozen=True)
class QrOptions:
    error_correction: str = "L"
    border: int = 1
    width_px: int = 150
    fill_color: str = "#000000"
    back_color: str = "#ffffff"

    @classmethod
    def from_config(cls, config: QrConfig) -> QrOptions:
        return cls(
            error_correction=config.error_correction,
            border=config.border,
            width_px=config.width_px,
            fill_color=config.fill_color,
            back_color=config.back_color,
        )


class QrCapacityError(ValueError):
    """Raised when a payload does not fit in the largest QR version."""


def _error_correction(level: str) -> int:
    try:
        return _ERROR_CORRECTION[level.upper()]
    except KeyError:
        raise ValueError(f"Unsupported error correction level: {level!r}") from None


def render_qr_image(payload: str, options: QrOptions | None = None) -> Image.Image:
    """Render a payload into a square PIL image of ``options.width_px``.

    Modules are scaled by a whole number of pixels and centred on the
    background, so every module has the same size. Only codes with more
    modules than ``width_px`` are scaled down.
    """
    opts = options or QrOptions()
    qr = qrcode.QRCode(
        version=None,
        error_correction=_error_correction(opts.error_correction),
        box_size=1,
        border=opts.border,
    )
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        logger.error("Payload of %d chars does not fit in a QR code", len(payload))
        raise QrCapacityError(
            f"Payload of {len(payload)} chars does not fit in a QR code "
            f"at error correction {opts.error_correction.upper()}"
        ) from exc

    side = qr.modules_count + 2 * opts.border
    qr.box_size = max(1, opts.width_px // side)
    code = qr.make_image(fill_color=opts.fill_color, back_color=opts.back_color).get_image()
    code = code.convert("RGB")
    if code.size[0] > opts.width_px:
        return code.resize((opts.width_px, opts.width_px), Image.Resampling.NEAREST)

    image = Image.new("RGB", (opts.width_px, opts.width_px), opts.back_color)
    offset = (opts.width_px - code.size[0]) // 2
    image.paste(code, (offset, offset))
    return image


def render_qr_png(payload: str, options: QrOptions | None = None) -> bytes:
    buffer = io.BytesIO()
    render_qr_image(payload, options).save(buffer, format="PNG")
    return buffer.getvalue()


def qr_data_url(payload: str, options: QrOptions | None = None) -> str:
    """Return the PNG as a ``data:`` URL for HTML templates."""
    encoded = base64.b64encode(render_qr_png(payload, options)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def save_qr_png(payload: str, path: Path, options: QrOptions | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(render_qr_png(payload, options))
    logger.info("QR image saved to %s", path)
    return path
