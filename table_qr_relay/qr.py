"""QR image generation for on-screen preview and browser printing"""

import base64
import io

import qrcode

from .config import QR_BOX_SIZE, QR_BORDER


def render_qr_png(url: str, box_size: int = QR_BOX_SIZE, border: int = QR_BORDER) -> bytes:
    """Render ``url`` as a black-on-white PNG.

    Args:
        url: Text to encode
        box_size: Pixels per module
        border: Quiet zone in modules

    Returns:
        PNG bytes
    """
    if not url:
        raise ValueError("URL required")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(url)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white").convert("RGB")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
