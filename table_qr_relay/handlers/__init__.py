"""
Table QR Relay Handlers
=======================

Protocol handlers for receipt printers.
"""

from .base import BaseHandler
from .escpos import ESCPOSHandler

__all__ = ['BaseHandler', 'ESCPOSHandler']

# Handler registry
HANDLERS = {
    'escpos': ESCPOSHandler,
}


def get_handler(handler_type: str) -> type:
    """Get handler class by type."""
    return HANDLERS.get(handler_type)
