"""
Printer Model
=============

Network address of the receipt printer the relay writes to.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class Printer:
    """Printer connection settings."""

    host: str
    port: int = 9100
    timeout: float = 10.0  # seconds, measured from the start of a send

    @property
    def address(self) -> str:
        """Address as ``host:port``."""
        return f'{self.host}:{self.port}'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
