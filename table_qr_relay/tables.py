"""
Table Provider
==============

Fetches the venue's seating tables from the point-of-sale REST API.

Usage:
    from table_qr_relay.tables import TableProvider

    provider = TableProvider('https://venue.revelup.com', api_key='...', api_secret='...')
    for table in provider.list_tables():
        print(table.id, table.name)
"""

import logging
import requests
from typing import Dict, List

from .errors import TableProviderError
from .models import Table

logger = logging.getLogger(__name__)

TABLES_ENDPOINT = '/resources/Table/'


class TableProvider:
    """Client for the point-of-sale table resource."""

    def __init__(self, base_url: str, api_key: str, api_secret: str, timeout: float = 15,
                 session: requests.Session = None):
        """
        Initialize provider.

        Args:
            base_url: Base URL of the point-of-sale API
            api_key: API key
            api_secret: API secret, sent together with the key
            timeout: Request timeout in seconds
            session: Optional requests session
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            'accept': 'application/json',
            'API-AUTHENTICATION': f'{self.api_key}:{self.api_secret}',
        }

    def list_tables(self) -> List[Table]:
        """
        List all tables.

        Raises:
            TableProviderError: request failed, non-2xx status, or bad JSON
        """
        url = f'{self.base_url}{TABLES_ENDPOINT}'

        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error('Table request to %s failed: %s', url, e)
            raise TableProviderError(f'Table request failed: {e}') from e

        if not response.ok:
            logger.error('Table API request failed with status %s: %s',
                         response.status_code, response.text)
            raise TableProviderError(f'API request failed with status {response.status_code}')

        try:
            payload = response.json()
        except ValueError as e:
            raise TableProviderError('Table API returned invalid JSON') from e

        objects = payload.get('objects') if isinstance(payload, dict) else None
        tables = [Table.from_dict(obj) for obj in objects or [] if isinstance(obj, dict)]
        logger.debug('Fetched %d tables', len(tables))
        return tables
