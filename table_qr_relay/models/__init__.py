"""
Table QR Relay Models
"""

from .printer import Printer
from .job import PrintJob, ReceiptLayout
from .table import Table

__all__ = ['Printer', 'PrintJob', 'ReceiptLayout', 'Table']
