"""
Table QR Relay - Main Application
=================================

Bridges the table picker front end, which cannot open raw sockets, to the
venue's receipt printer.

Run: python -m table_qr_relay
"""

import logging
import sys
from typing import Optional

from flask import Flask, Blueprint, current_app, request, jsonify
from flask_cors import CORS

from . import __version__
from .config import (
    PORT, HOST, DEBUG, LOG_LEVEL, EXCLUSIVE_PRINTING, TEST_DATA, TEST_TABLE_NAME,
    default_printer, default_layout, default_table_provider,
)
from .errors import RelayError, ValidationError
from .handlers import BaseHandler, get_handler
from .handlers.escpos import MAX_PAYLOAD_BYTES
from .links import build_deep_link
from .models import Printer, PrintJob, ReceiptLayout
from .qr import render_qr_png, to_data_url
from .tables import TableProvider
from .transport import SocketTransport

logger = logging.getLogger(__name__)

relay = Blueprint('relay', __name__)

# =============================================================================
# Application Setup
# =============================================================================


def create_app(printer: Optional[Printer] = None,
               layout: Optional[ReceiptLayout] = None,
               table_provider: Optional[TableProvider] = None,
               exclusive: bool = EXCLUSIVE_PRINTING,
               handler_type: str = 'escpos') -> Flask:
    """
    Build the relay application.

    Args:
        printer: Printer to deliver to (defaults to the configured one)
        layout: Receipt texts (defaults to the configured ones)
        table_provider: Table list source; None reads the configuration
        exclusive: Serialize jobs to the same printer
        handler_type: Printer protocol handler
    """
    printer = printer or default_printer()
    handler_class = get_handler(handler_type)
    if not handler_class:
        raise ValueError(f'Unknown handler type: {handler_type}')

    app = Flask(__name__)
    CORS(app)

    app.extensions['relay_printer'] = printer
    app.extensions['relay_handler'] = handler_class(
        printer,
        layout=layout or default_layout(),
        transport=SocketTransport(printer, exclusive=exclusive),
    )
    app.extensions['relay_tables'] = table_provider or default_table_provider()

    app.register_blueprint(relay)
    return app


def _handler() -> BaseHandler:
    return current_app.extensions['relay_handler']


@relay.errorhandler(RelayError)
def handle_relay_error(error: RelayError):
    if isinstance(error, ValidationError):
        logger.warning('Rejected request: %s', error.message)
    else:
        logger.error('Print error: %s', error.message)
    return jsonify({'error': error.message}), error.status_code


# =============================================================================
# Printing
# =============================================================================

@relay.route('/print-qr', methods=['POST'])
def print_qr():
    """Print the QR receipt for a table."""
    job = PrintJob.from_dict(request.get_json(silent=True))
    logger.info('Print request: Table %s, Data: %s', job.table_name, job.data)

    _handler().print_job(job)

    return jsonify({'success': True, 'message': 'QR code printed successfully'})


# =============================================================================
# Health & Diagnostics
# =============================================================================

@relay.route('/health', methods=['GET'])
def health():
    """Liveness check. Never contacts the printer."""
    printer = current_app.extensions['relay_printer']
    return jsonify({
        'status': 'OK',
        'message': 'Print relay server is running',
        'printer': printer.address,
    })


@relay.route('/test-printer', methods=['GET'])
def test_printer():
    """Print a receipt with fixed content."""
    _handler().print_job(PrintJob(data=TEST_DATA, table_name=TEST_TABLE_NAME))
    return jsonify({'success': True, 'message': 'Test print sent successfully'})


# =============================================================================
# Tables & Links
# =============================================================================

@relay.route('/tables', methods=['GET'])
def list_tables():
    """Tables from the point-of-sale provider."""
    provider = current_app.extensions['relay_tables']
    if provider is None:
        return jsonify({'error': 'Table provider not configured'}), 503

    try:
        tables = provider.list_tables()
    except RelayError as e:
        logger.error('Error fetching tables: %s', e.message)
        return jsonify({'error': 'Failed to fetch tables'}), 500

    return jsonify({'tables': [t.to_dict() for t in tables]})


@relay.route('/table-link', methods=['POST'])
def table_link():
    """Deep link and QR preview for a table."""
    data = request.get_json(silent=True) or {}
    table_name = data.get('tableName')
    if not isinstance(table_name, str) or not table_name.strip():
        raise ValidationError('Missing tableName')

    link = build_deep_link(table_name)
    # The printer stores at most MAX_PAYLOAD_BYTES of QR data
    if len(link.encode('utf-8')) > MAX_PAYLOAD_BYTES:
        raise ValidationError(f'tableName too long: link exceeds {MAX_PAYLOAD_BYTES} bytes')

    return jsonify({
        'tableName': table_name,
        'link': link,
        'qr': to_data_url(render_qr_png(link)),
    })


# =============================================================================
# Main
# =============================================================================

def configure_logging(level: str = LOG_LEVEL):
    """Log to stderr with a single handler."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main():
    """Run the relay."""
    configure_logging()
    app = create_app()
    printer = app.extensions['relay_printer']

    print("=" * 60)
    print("  Table QR Relay")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Listening: http://{HOST}:{PORT}")
    print(f"  Printer: {printer.address}")
    print("=" * 60)
    print("  API Endpoints:")
    print("    POST /print-qr                        - Print table QR receipt")
    print("    GET  /health                          - Health check")
    print("    GET  /test-printer                    - Print test receipt")
    print("    GET  /tables                          - List venue tables")
    print("    POST /table-link                      - Deep link + QR preview")
    print("=" * 60)

    # threaded: each request blocks only its own thread on printer I/O
    app.run(host=HOST, port=PORT, debug=DEBUG, threaded=True)


if __name__ == '__main__':
    main()
