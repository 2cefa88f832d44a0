import queue
import socket
import socketserver
import threading

import pytest

from table_qr_relay import app as app_module
from table_qr_relay.app import create_app
from table_qr_relay.models import Printer


class _JobHandler(socketserver.BaseRequestHandler):
    """Reads one job until the client half-closes, like a port 9100 printer."""

    def handle(self):
        chunks = []
        while True:
            chunk = self.request.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
        self.server.received.put(b''.join(chunks))


class MockPrinter(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self):
        super().__init__(('127.0.0.1', 0), _JobHandler)
        self.received = queue.Queue()

    @property
    def port(self):
        return self.server_address[1]

    def next_job(self, timeout=5):
        return self.received.get(timeout=timeout)


@pytest.fixture
def mock_printer():
    server = MockPrinter()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def no_table_provider(monkeypatch):
    monkeypatch.setattr(app_module, 'default_table_provider', lambda: None)


@pytest.fixture
def relay_app(mock_printer, no_table_provider):
    app = create_app(printer=Printer(host='127.0.0.1', port=mock_printer.port, timeout=5))
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(relay_app):
    return relay_app.test_client()
