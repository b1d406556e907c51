"""Address resolution, local binding and interface discovery.

This module provides functionality for:
- Resolving a target to its first socket address
- Validating the local bind address given with ``--interface``
- Binding outgoing sockets to that address before connecting
- Scanning local network interfaces

Resolution deliberately keeps only the first candidate returned by the
system resolver; there is no fallback to later candidates.

Example:
    binder = binder_for(parse_bind_address("192.168.1.10"))
    family, sockaddr = resolve_first("example.com", 443)
    sock = open_connection(family, sockaddr, 1.0, binder)
"""

import ipaddress
import socket
from dataclasses import dataclass, field

import psutil

from paping.core.exceptions import InvalidBindAddressError

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# Interface prefixes that are never useful as a probe source
SKIPPED_PREFIXES = ("lo", "vmnet", "docker", "veth", "bridge", "utun")


@dataclass
class NetworkInterface:
    """Network interface representation with its key properties.

    Attributes:
        name: Interface name (e.g., 'en0', 'eth0')
        addresses: IPv4 and IPv6 addresses assigned to the interface
        is_up: Boolean indicating if the interface is up and running
    """

    name: str
    addresses: list[str] = field(default_factory=list)
    is_up: bool = False


class LocalBinder:
    """Source-address capability applied to outgoing sockets.

    The base implementation leaves the choice of source address to the OS.
    """

    address: IPAddress | None = None

    def bind(self, sock: socket.socket) -> None:
        """Prepare ``sock`` before it connects."""


class AddressBinder(LocalBinder):
    """Bind outgoing sockets to a fixed local IP with an ephemeral port."""

    def __init__(self, address: IPAddress) -> None:
        self.address = address

    def bind(self, sock: socket.socket) -> None:
        sock.bind((str(self.address), 0))


def binder_for(address: IPAddress | None) -> LocalBinder:
    """Select the binder implementation for an optional local address."""
    if address is None:
        return LocalBinder()
    return AddressBinder(address)


def parse_bind_address(text: str) -> IPAddress:
    """Parse the ``--interface`` value.

    Raises:
        InvalidBindAddressError: If ``text`` is not an IPv4 or IPv6 literal
    """
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        raise InvalidBindAddressError(f"invalid interface IP '{text}'") from None


def resolve_first(host: str, port: int) -> tuple[int, tuple] | None:
    """Resolve ``host:port`` and return the first (family, sockaddr) pair.

    Returns:
        tuple | None: First candidate, or None when nothing resolves
    """
    try:
        candidates = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError):
        return None
    if not candidates:
        return None
    family, _, _, _, sockaddr = candidates[0]
    return family, sockaddr


def open_connection(
    family: int, sockaddr: tuple, timeout: float, binder: LocalBinder
) -> socket.socket:
    """Open a TCP connection to ``sockaddr`` within ``timeout`` seconds."""
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        binder.bind(sock)
        sock.settimeout(timeout)
        sock.connect(sockaddr)
    except BaseException:
        sock.close()
        raise
    return sock


def scan_interfaces() -> list[NetworkInterface]:
    """List local interfaces that carry at least one IP address."""
    stats = psutil.net_if_stats()
    interfaces = []
    for name, addrs in psutil.net_if_addrs().items():
        if name.startswith(SKIPPED_PREFIXES):
            continue

        addresses = [
            addr.address.split("%")[0]
            for addr in addrs
            if addr.family in (socket.AF_INET, socket.AF_INET6)
        ]
        if not addresses:
            continue

        iface_stats = stats.get(name)
        interfaces.append(
            NetworkInterface(
                name=name,
                addresses=addresses,
                is_up=bool(iface_stats and iface_stats.isup),
            )
        )
    return interfaces


def interface_for_address(address: IPAddress) -> str | None:
    """Return the name of the interface that owns ``address``, if any."""
    for name, addrs in psutil.net_if_addrs().items():
        for addr in addrs:
            if addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                if ipaddress.ip_address(addr.address.split("%")[0]) == address:
                    return name
            except ValueError:
                continue
    return None
