"""
Table QR Relay
==============

Prints table QR codes on a network receipt printer.

The front end picks a table, builds a deep link into the ordering bot and
posts it here; the relay turns it into ESC/POS commands and writes them to
the printer over a raw socket.

Usage:
    python -m table_qr_relay

API Endpoints:
    POST /print-qr      - Print QR receipt for a table
    GET  /health        - Health check
    GET  /test-printer  - Print test receipt
    GET  /tables        - Venue tables from the point-of-sale API
    POST /table-link    - Deep link and QR preview image
"""

__version__ = '1.0.0'
__author__ = 'Club Krush'
