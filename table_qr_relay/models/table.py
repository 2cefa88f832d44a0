"""
Table Model
===========

A seating table as listed by the point-of-sale provider.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class Table:
    """Seating table."""

    id: Any
    name: str

    # Provider fields we do not interpret
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = dict(self.extra)
        data['id'] = self.id
        data['name'] = self.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Table':
        """Create from a provider object."""
        extra = {k: v for k, v in data.items() if k not in ('id', 'name')}
        name = data.get('name') or ''
        return cls(id=data.get('id'), name=str(name), extra=extra)
