"""
ESC/POS Handler
===============

Handler for ESC/POS receipt printers (Epson TM-T82X and compatibles).
The QR code is rendered by the printer itself from the GS ( k symbol
commands; only the payload text travels over the wire.
"""

from ..errors import PayloadTooLargeError
from ..models import PrintJob
from .base import BaseHandler

# Bytes the store command carries ahead of the payload: cn fn m
STORE_HEADER_LENGTH = 3
MAX_PAYLOAD_BYTES = 0xff - STORE_HEADER_LENGTH


class ESCPOSHandler(BaseHandler):
    """Handler for ESC/POS printers."""

    # ESC/POS commands
    ESC = b'\x1b'
    GS = b'\x1d'
    LF = b'\x0a'
    INIT = b'\x1b\x40'  # ESC @
    CUT = b'\x1d\x56\x00'  # GS V 0, full cut

    # Alignment
    ALIGN_CENTER = b'\x1b\x61\x01'  # ESC a 1

    # QR code (GS ( k, cn = 0x31)
    QR_PREFIX = b'\x1d\x28\x6b'  # GS ( k
    QR_MODEL_2 = b'\x1d\x28\x6b\x04\x00\x31\x41\x32\x00'  # fn 65: model 2
    QR_MODULE_SIZE = b'\x1d\x28\x6b\x03\x00\x31\x43\x08'  # fn 67: 8 dots
    QR_ERROR_LEVEL_L = b'\x1d\x28\x6b\x03\x00\x31\x45\x30'  # fn 69: level L
    QR_STORE = b'\x31\x50\x30'  # fn 80: store data
    QR_PRINT = b'\x1d\x28\x6b\x03\x00\x31\x51\x30'  # fn 81: print symbol

    def encode(self, job: PrintJob) -> bytes:
        """
        Build the receipt: header, QR symbol, footer, cut.

        Command order matters; the printer executes them positionally.
        """
        layout = self.layout
        data = bytearray()

        data.extend(self.INIT)
        data.extend(self.ALIGN_CENTER)

        data.extend(self._line(layout.venue_name))
        data.extend(self._line(f'Table {job.table_name}'))
        data.extend(self._line(layout.instruction) + self.LF)

        data.extend(self.QR_MODEL_2)
        data.extend(self.QR_MODULE_SIZE)
        data.extend(self.QR_ERROR_LEVEL_L)
        data.extend(self.store_qr_data(job.data))
        data.extend(self.QR_PRINT)

        data.extend(self.LF + self.LF)

        data.extend(self._line(layout.bot_handle))
        data.extend(self._line(layout.thank_you))

        data.extend(self.CUT)
        return bytes(data)

    def store_qr_data(self, payload: str) -> bytes:
        """
        GS ( k pL pH 1 P 0 d1...dk

        pL counts the payload bytes plus the three cn/fn/m bytes. pH is always
        zero, so payloads longer than MAX_PAYLOAD_BYTES are refused.
        """
        raw = payload.encode('utf-8')
        if len(raw) > MAX_PAYLOAD_BYTES:
            raise PayloadTooLargeError(
                f'QR data is {len(raw)} bytes; at most {MAX_PAYLOAD_BYTES} bytes can be printed'
            )

        return self.QR_PREFIX + bytes([len(raw) + STORE_HEADER_LENGTH, 0x00]) + self.QR_STORE + raw

    def _line(self, text: str) -> bytes:
        return text.encode('utf-8') + self.LF
