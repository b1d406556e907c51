"""Shared fixtures: a scripted SOCKS5 server and local TCP endpoints."""

from __future__ import annotations

import socket
import socketserver
import threading

import pytest

from paping.core.lib import probe_engine

IPV4_BOUND_REPLY = bytes([0x05, 0x00, 0x00, 0x01, 127, 0, 0, 1, 0x1F, 0x90])


def _recv_exact(sock: socket.socket, size: int) -> bytes | None:
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            return None
        data += chunk
    return data


class ScriptedSocksHandler(socketserver.BaseRequestHandler):
    """Answer each handshake step with the bytes configured on the server.

    Everything the client sends is recorded on ``server.received`` keyed by
    step name. After a successful CONNECT reply the handler echoes data back.
    With ``stall_at`` set to "greeting" or "connect" the handler reads that
    step and then sends nothing until the client hangs up.
    """

    def _read_connect_request(self) -> bytes | None:
        header = _recv_exact(self.request, 4)
        if header is None:
            return None
        addr_type = header[3]
        if addr_type == 0x01:
            rest = _recv_exact(self.request, 4 + 2)
        elif addr_type == 0x04:
            rest = _recv_exact(self.request, 16 + 2)
        else:
            length = _recv_exact(self.request, 1)
            if length is None:
                return None
            tail = _recv_exact(self.request, length[0] + 2)
            rest = None if tail is None else length + tail
        return None if rest is None else header + rest

    def _read_auth_request(self) -> bytes | None:
        head = _recv_exact(self.request, 2)
        if head is None:
            return None
        username = _recv_exact(self.request, head[1]) if head[1] else b""
        plen = _recv_exact(self.request, 1)
        if username is None or plen is None:
            return None
        password = _recv_exact(self.request, plen[0]) if plen[0] else b""
        return head + username + plen + (password or b"")

    def _hold_until_closed(self) -> None:
        while self.request.recv(1024):
            pass

    def handle(self) -> None:
        server: ScriptedSocksServer = self.server
        try:
            head = _recv_exact(self.request, 2)
            if head is None:
                return
            methods = _recv_exact(self.request, head[1])
            server.received["greeting"] = head + (methods or b"")
            if server.stall_at == "greeting":
                self._hold_until_closed()
                return
            self.request.sendall(server.method_reply)
            if len(server.method_reply) < 2:
                return

            selected = server.method_reply[1]
            if selected == 0x02:
                auth = self._read_auth_request()
                if auth is None:
                    return
                server.received["auth"] = auth
                self.request.sendall(server.auth_reply)
            elif selected != 0x00:
                # Give the client a chance to (wrongly) send CONNECT
                self.request.settimeout(0.5)
                try:
                    extra = self.request.recv(1024)
                except OSError:
                    extra = b""
                if extra:
                    server.received["connect"] = extra
                return

            request = self._read_connect_request()
            if request is None:
                return
            server.received["connect"] = request
            if server.stall_at == "connect":
                self._hold_until_closed()
                return
            self.request.sendall(server.connect_reply)

            while data := self.request.recv(4096):
                self.request.sendall(data)
        except OSError:
            pass
        finally:
            server.done.set()


class ScriptedSocksServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    """SOCKS5 server stub replying with fixed byte strings."""

    allow_reuse_address = True
    daemon_threads = True

    def __init__(
        self,
        method_reply: bytes,
        auth_reply: bytes,
        connect_reply: bytes,
        stall_at: str | None = None,
    ) -> None:
        super().__init__(("127.0.0.1", 0), ScriptedSocksHandler)
        self.method_reply = method_reply
        self.auth_reply = auth_reply
        self.connect_reply = connect_reply
        self.stall_at = stall_at
        self.received: dict[str, bytes] = {}
        self.done = threading.Event()

    @property
    def port(self) -> int:
        return self.server_address[1]

    @property
    def url(self) -> str:
        return f"socks5://127.0.0.1:{self.port}"


@pytest.fixture
def socks_server():
    """Factory starting a scripted SOCKS5 server on 127.0.0.1."""
    servers: list[ScriptedSocksServer] = []

    def _start(
        method_reply: bytes = bytes([0x05, 0x00]),
        auth_reply: bytes = bytes([0x01, 0x00]),
        connect_reply: bytes = IPV4_BOUND_REPLY,
        stall_at: str | None = None,
    ) -> ScriptedSocksServer:
        server = ScriptedSocksServer(method_reply, auth_reply, connect_reply, stall_at)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def listening_port():
    """Port of a local socket that accepts connections via its backlog."""
    with socket.create_server(("127.0.0.1", 0), backlog=64) as server:
        yield server.getsockname()[1]


@pytest.fixture
def closed_port() -> int:
    """Port on 127.0.0.1 with nothing listening."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def fast_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    """Shrink the pause between probes so multi-probe runs stay quick."""
    monkeypatch.setattr(probe_engine, "PROBE_INTERVAL", 0.01)
    monkeypatch.setattr(probe_engine, "POLL_INTERVAL", 0.005)
