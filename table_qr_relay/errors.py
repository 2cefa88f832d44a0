"""
Relay Errors
============

Every failure the relay reports to a caller derives from RelayError.
The HTTP layer maps each class to a status code via ``status_code``.
"""


class RelayError(Exception):
    """Base class for relay failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Bad or missing client input. Never retried."""

    status_code = 400


class PayloadTooLargeError(ValidationError):
    """QR payload does not fit the one-byte length field of the store command."""


class PrinterConnectionError(RelayError, ConnectionError):
    """Printer unreachable, refused, or the connection dropped mid-write."""


class PrinterTimeoutError(RelayError, TimeoutError):
    """Connect and write did not complete within the printer timeout."""


class TableProviderError(RelayError):
    """Table list could not be fetched from the point-of-sale API."""
