import pytest

from table_qr_relay.errors import PayloadTooLargeError, ValidationError
from table_qr_relay.handlers import ESCPOSHandler, get_handler
from table_qr_relay.handlers.escpos import MAX_PAYLOAD_BYTES
from table_qr_relay.models import Printer, PrintJob, ReceiptLayout

LINK = 'https://t.me/bot?start=tableA_2025-01-01_00-00-00'


@pytest.fixture
def handler():
    return ESCPOSHandler(Printer(host='127.0.0.1'))


def test_registry_returns_escpos():
    assert get_handler('escpos') is ESCPOSHandler
    assert get_handler('zpl') is None


def test_full_receipt_bytes(handler):
    buf = handler.encode(PrintJob(data=LINK, table_name='A'))

    expected = (
        b'\x1b\x40'
        b'\x1b\x61\x01'
        b'Club Krush\n'
        b'Table A\n'
        b'Scan to order\n\n'
        b'\x1d\x28\x6b\x04\x00\x31\x41\x32\x00'
        b'\x1d\x28\x6b\x03\x00\x31\x43\x08'
        b'\x1d\x28\x6b\x03\x00\x31\x45\x30'
        b'\x1d\x28\x6b\x34\x00\x31\x50\x30' + LINK.encode() +
        b'\x1d\x28\x6b\x03\x00\x31\x51\x30'
        b'\n\n'
        b'@club_krush_bot\n'
        b'Thank you for dining with us!\n'
        b'\x1d\x56\x00'
    )
    assert buf == expected


def test_starts_with_init_and_ends_with_cut(handler):
    buf = handler.encode(PrintJob(data=LINK, table_name='A'))
    assert buf.startswith(b'\x1b\x40')
    assert buf.endswith(b'\x1d\x56\x00')


@pytest.mark.parametrize('payload', ['x', 'https://t.me/club_krush_bot', 'é' * 40, 'a' * MAX_PAYLOAD_BYTES])
def test_store_length_counts_payload_bytes_plus_three(handler, payload):
    raw = payload.encode('utf-8')
    store = handler.store_qr_data(payload)

    assert store[:3] == b'\x1d\x28\x6b'
    assert store[3] == len(raw) + 3
    assert store[4] == 0
    assert store[5:8] == b'\x31\x50\x30'
    assert store[8:] == raw


def test_oversized_payload_rejected(handler):
    with pytest.raises(PayloadTooLargeError) as exc:
        handler.encode(PrintJob(data='a' * (MAX_PAYLOAD_BYTES + 1), table_name='A'))
    assert isinstance(exc.value, ValidationError)
    assert exc.value.status_code == 400


def test_multibyte_payload_counted_in_bytes(handler):
    # 126 two-byte characters = 252 bytes fits, 127 does not
    handler.store_qr_data('é' * 126)
    with pytest.raises(PayloadTooLargeError):
        handler.store_qr_data('é' * 127)


def test_table_name_and_layout_are_utf8(handler):
    handler.layout = ReceiptLayout(venue_name='Café Bleu', instruction='Scannen',
                                   bot_handle='@bleu_bot', thank_you='Merci!')
    buf = handler.encode(PrintJob(data='x', table_name='Terrasse 3'))

    assert b'Caf\xc3\xa9 Bleu\nTable Terrasse 3\nScannen\n\n' in buf
    assert buf.endswith(b'\n\n@bleu_bot\nMerci!\n\x1d\x56\x00')


def test_qr_commands_in_protocol_order(handler):
    buf = handler.encode(PrintJob(data=LINK, table_name='A'))
    positions = [
        buf.index(ESCPOSHandler.QR_MODEL_2),
        buf.index(ESCPOSHandler.QR_MODULE_SIZE),
        buf.index(ESCPOSHandler.QR_ERROR_LEVEL_L),
        buf.index(ESCPOSHandler.QR_STORE),
        buf.index(ESCPOSHandler.QR_PRINT),
    ]
    assert positions == sorted(positions)
