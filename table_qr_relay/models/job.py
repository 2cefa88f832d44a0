"""
Print Job Model
===============

A single QR print request. Lives for one HTTP request only.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..errors import ValidationError

MISSING_FIELDS = 'Missing data or tableName'


@dataclass(frozen=True)
class PrintJob:
    """Payload to render as a QR code plus the table it belongs to."""

    data: str
    table_name: str

    def __post_init__(self):
        if not _is_filled(self.data) or not _is_filled(self.table_name):
            raise ValidationError(MISSING_FIELDS)

    @classmethod
    def from_dict(cls, body: Optional[Dict[str, Any]]) -> 'PrintJob':
        """Create from a request body using the wire names ``data``/``tableName``."""
        body = body if isinstance(body, dict) else {}
        return cls(data=body.get('data'), table_name=body.get('tableName'))

    def to_dict(self) -> Dict[str, Any]:
        return {'data': self.data, 'tableName': self.table_name}


@dataclass(frozen=True)
class ReceiptLayout:
    """Fixed texts printed around the QR code."""

    venue_name: str = 'Club Krush'
    instruction: str = 'Scan to order'
    bot_handle: str = '@club_krush_bot'
    thank_you: str = 'Thank you for dining with us!'


def _is_filled(value) -> bool:
    return isinstance(value, str) and value != ''
