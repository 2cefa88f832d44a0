"""
Table QR Relay Client
=====================

Python SDK for the relay HTTP API.

Usage:
    from table_qr_relay.client import RelayClient

    client = RelayClient('http://192.168.31.10:3001')

    # Print a table receipt
    link = client.table_link('A1')['link']
    result = client.print_qr(link, 'A1')

    # Check the relay and the printer
    client.is_online()
    client.test_printer()
"""

import requests
from typing import Dict, Any


class RelayClient:
    """Client for the table QR relay."""

    def __init__(self, base_url: str = 'http://localhost:3001', timeout: float = 30):
        """
        Initialize client.

        Args:
            base_url: Base URL of the relay
            timeout: Request timeout in seconds; keep it above the printer timeout
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Dict[str, Any]:
        """Make API request. Failures come back as ``{'success': False, 'error': ...}``."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'GET':
                response = requests.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data, timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')

            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except ValueError:
            return {'success': False, 'error': f'Invalid response from {url}'}
        except requests.exceptions.RequestException as e:
            return {'success': False, 'error': str(e)}

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Check relay health."""
        return self._request('GET', '/health')

    def is_online(self) -> bool:
        """Check if relay is online."""
        return self.health().get('status') == 'OK'

    # =========================================================================
    # Printing
    # =========================================================================

    def print_qr(self, data: str, table_name: str) -> Dict[str, Any]:
        """
        Print a QR receipt.

        Args:
            data: Text the printer encodes as QR (usually a deep link)
            table_name: Table label printed above the code
        """
        return self._request('POST', '/print-qr', {'data': data, 'tableName': table_name})

    def test_printer(self) -> Dict[str, Any]:
        """Print the fixed test receipt."""
        return self._request('GET', '/test-printer')

    # =========================================================================
    # Tables
    # =========================================================================

    def tables(self) -> Dict[str, Any]:
        """List venue tables. Failures carry an 'error' key instead of 'tables'."""
        return self._request('GET', '/tables')

    def table_link(self, table_name: str) -> Dict[str, Any]:
        """Deep link and QR preview data URL for a table."""
        return self._request('POST', '/table-link', {'tableName': table_name})
