"""
Base Handler
============

Abstract base class for printer handlers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

from ..models import Printer, PrintJob, ReceiptLayout
from ..transport import SocketTransport

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """Turns a PrintJob into printer commands and delivers them."""

    def __init__(self, printer: Printer, layout: Optional[ReceiptLayout] = None,
                 transport: Optional[SocketTransport] = None):
        """
        Initialize handler.

        Args:
            printer: Printer to deliver to
            layout: Receipt texts (defaults to ReceiptLayout())
            transport: Delivery transport (defaults to a SocketTransport for printer)
        """
        self.printer = printer
        self.layout = layout or ReceiptLayout()
        self.transport = transport or SocketTransport(printer)

    @abstractmethod
    def encode(self, job: PrintJob) -> bytes:
        """
        Build the command buffer for a job.

        Raises:
            ValidationError: job content cannot be encoded
        """

    def print_job(self, job: PrintJob) -> Dict[str, Any]:
        """
        Encode and send a job.

        Returns:
            Dict with success status and transport details

        Raises:
            ValidationError, PrinterConnectionError, PrinterTimeoutError
        """
        commands = self.encode(job)
        result = self.transport.send(commands)
        logger.info('Print job for table %s sent (%d bytes)', job.table_name, result['bytes_sent'])
        result['success'] = True
        return result
