"""
Printer Transport
=================

Raw TCP delivery of a command buffer to a network printer (port 9100 style).
The printer never acknowledges a job: a send succeeds once the whole buffer
has been written and the write side half-closed.
"""

import concurrent.futures
import logging
import socket
import threading
import time
from typing import Dict, Any, List, Tuple

from .errors import PrinterConnectionError, PrinterTimeoutError
from .models import Printer

logger = logging.getLogger(__name__)

# Name lookups that outlive their deadline keep running here in the background
_resolver = concurrent.futures.ThreadPoolExecutor(max_workers=4, thread_name_prefix='printer-resolve')


class SocketTransport:
    """Opens one connection per send to ``printer.host:printer.port``."""

    # Per-device locks used in exclusive mode, keyed by (host, port)
    _device_locks: Dict[Tuple[str, int], threading.Lock] = {}
    _device_locks_guard = threading.Lock()

    def __init__(self, printer: Printer, exclusive: bool = False):
        self.printer = printer
        self.exclusive = exclusive

    def send(self, data: bytes) -> Dict[str, Any]:
        """
        Send raw bytes to the printer.

        Args:
            data: Complete command buffer

        Returns:
            Dict with host, port and bytes_sent

        Raises:
            PrinterConnectionError: connect failed or the connection dropped
            PrinterTimeoutError: not done within ``printer.timeout`` seconds
        """
        deadline = time.monotonic() + self.printer.timeout

        if not self.exclusive:
            return self._send(data, deadline)

        lock = self._device_lock()
        if not lock.acquire(timeout=self.printer.timeout):
            raise PrinterTimeoutError(f'Connection timeout to {self.printer.address}')
        try:
            return self._send(data, deadline)
        finally:
            lock.release()

    def _send(self, data: bytes, deadline: float) -> Dict[str, Any]:
        host, port = self.printer.host, self.printer.port
        logger.info('Connecting to printer at %s:%s', host, port)

        sock = None
        try:
            sock = self._connect(host, port, deadline)
            logger.debug('Connected to printer, sending %d bytes', len(data))
            sock.settimeout(self._remaining(deadline))
            sock.sendall(data)
            sock.shutdown(socket.SHUT_WR)
        except socket.timeout:
            raise PrinterTimeoutError(f'Connection timeout to {host}:{port}') from None
        except ConnectionRefusedError as e:
            raise PrinterConnectionError(f'Connection refused by {host}:{port}') from e
        except OSError as e:
            raise PrinterConnectionError(f'Printer connection error ({host}:{port}): {e}') from e
        finally:
            if sock is not None:
                sock.close()
                logger.debug('Connection to printer closed')

        return {
            'host': host,
            'port': port,
            'bytes_sent': len(data),
        }

    def _connect(self, host: str, port: int, deadline: float) -> socket.socket:
        """Try each resolved address in turn, all within the same deadline."""
        last_error = None
        for family, type_, proto, _, sockaddr in self._resolve(host, port, deadline):
            sock = self._open_socket(family, type_, proto)
            try:
                sock.settimeout(self._remaining(deadline))
                sock.connect(sockaddr)
                return sock
            except socket.timeout:
                sock.close()
                raise
            except OSError as e:
                sock.close()
                last_error = e

        if last_error is not None:
            raise last_error
        raise OSError(f'No address found for {host}')

    def _resolve(self, host: str, port: int, deadline: float) -> List[tuple]:
        # getaddrinfo cannot be given a timeout, so it runs on a worker thread
        future = _resolver.submit(socket.getaddrinfo, host, port, 0, socket.SOCK_STREAM)
        try:
            return future.result(timeout=self._remaining(deadline))
        except concurrent.futures.TimeoutError:
            future.cancel()
            raise socket.timeout() from None

    def _open_socket(self, family: int, type_: int, proto: int) -> socket.socket:
        return socket.socket(family, type_, proto)

    def _remaining(self, deadline: float) -> float:
        remaining = deadline - time.monotonic()
        # A zero timeout would put the socket in non-blocking mode
        if remaining <= 0:
            raise socket.timeout()
        return remaining

    def _device_lock(self) -> threading.Lock:
        key = (self.printer.host, self.printer.port)
        with self._device_locks_guard:
            lock = self._device_locks.get(key)
            if lock is None:
                lock = self._device_locks[key] = threading.Lock()
            return lock
