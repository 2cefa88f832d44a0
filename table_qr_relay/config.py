"""
Table QR Relay Configuration
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('RELAY_PORT', 3001))
HOST = os.environ.get('RELAY_HOST', '0.0.0.0')
DEBUG = os.environ.get('RELAY_DEBUG', 'false').lower() == 'true'
LOG_LEVEL = os.environ.get('RELAY_LOG_LEVEL', 'INFO').upper()

# =============================================================================
# Printer Defaults
# =============================================================================

PRINTER_HOST = os.environ.get('PRINTER_HOST', '192.168.31.20')
PRINTER_PORT = int(os.environ.get('PRINTER_PORT', 9100))
DEFAULT_TIMEOUT = float(os.environ.get('PRINTER_TIMEOUT', 10))  # seconds

# Serialize jobs per printer instead of letting them race
EXCLUSIVE_PRINTING = os.environ.get('RELAY_EXCLUSIVE_PRINTING', 'false').lower() == 'true'

# =============================================================================
# Receipt Layout
# =============================================================================

VENUE_NAME = os.environ.get('VENUE_NAME', 'Club Krush')
ORDER_INSTRUCTION = os.environ.get('ORDER_INSTRUCTION', 'Scan to order')
BOT_HANDLE = os.environ.get('BOT_HANDLE', '@club_krush_bot')
THANK_YOU_LINE = os.environ.get('THANK_YOU_LINE', 'Thank you for dining with us!')

# Content printed by /test-printer
TEST_TABLE_NAME = 'TEST'
TEST_DATA = 'https://t.me/club_krush_bot'

# =============================================================================
# Deep Links
# =============================================================================

BOT_LINK_HOST = os.environ.get('BOT_LINK_HOST', 't.me')
BOT_NAME = os.environ.get('BOT_NAME', 'club_krush_bot')

QR_BOX_SIZE = 10
QR_BORDER = 2

# =============================================================================
# Table Provider (point-of-sale REST API)
# =============================================================================

TABLES_API_URL = os.environ.get('TABLES_API_URL', '')
TABLES_API_KEY = os.environ.get('TABLES_API_KEY', '')
TABLES_API_SECRET = os.environ.get('TABLES_API_SECRET', '')
TABLES_TIMEOUT = 15


def default_printer():
    """Printer built from the environment."""
    from .models import Printer
    return Printer(host=PRINTER_HOST, port=PRINTER_PORT, timeout=DEFAULT_TIMEOUT)


def default_layout():
    """Receipt layout built from the environment."""
    from .models import ReceiptLayout
    return ReceiptLayout(
        venue_name=VENUE_NAME,
        instruction=ORDER_INSTRUCTION,
        bot_handle=BOT_HANDLE,
        thank_you=THANK_YOU_LINE,
    )


def default_table_provider():
    """Table provider built from the environment, or None when unset."""
    if not (TABLES_API_URL and TABLES_API_KEY and TABLES_API_SECRET):
        return None
    from .tables import TableProvider
    return TableProvider(
        TABLES_API_URL,
        api_key=TABLES_API_KEY,
        api_secret=TABLES_API_SECRET,
        timeout=TABLES_TIMEOUT,
    )
