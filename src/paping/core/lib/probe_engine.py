"""Repeated TCP connection probes against a single target.

This module implements the measurement loop:
- One probe is one TCP connect, direct or through a SOCKS5 tunnel
- The connection is closed as soon as it is established
- Latency is measured from before resolution until the connect completes
- Probes are spaced one second apart
- A shared ``threading.Event`` stops the loop between probes

The pause between probes is polled in short slices so that a stop request
is honoured within one slice. A probe that has already started always runs
to completion and is recorded.

Example:
    engine = ProbeEngine("example.com", 443, timeout=1.0)
    stop = threading.Event()
    stats = engine.run(4, stop, on_probe=print)
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from paping.core import network
from paping.core.exceptions import ProxyError
from paping.core.lib.probe_stats import ProbeStatistics
from paping.core.network import LocalBinder
from paping.core.socks5 import ProxyConfig, ProxyTunnelClient

PROBE_INTERVAL = 1.0  # Seconds between consecutive probes
POLL_INTERVAL = 0.1  # Seconds between stop-flag checks while waiting

UNRESOLVED_REASON = "could not resolve address"


@dataclass(frozen=True)
class Connected:
    """Probe that reached the target."""

    latency_ms: float
    seq: int = 0


@dataclass(frozen=True)
class Failed:
    """Probe that did not reach the target."""

    reason: str
    seq: int = 0


ProbeOutcome = Connected | Failed


class ProbeEngine:
    """Run TCP reachability probes and aggregate their results.

    Attributes:
        host: Target host name or IP literal
        port: Target TCP port
        timeout: Connect timeout in seconds, also the per-step proxy deadline
        proxy: Proxy configuration, or None for direct probes
        binder: Source-address capability for direct probes
        stats: Statistics updated once per probe
    """

    def __init__(
        self,
        host: str,
        port: int,
        timeout: float,
        proxy: ProxyConfig | None = None,
        binder: LocalBinder | None = None,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.proxy = proxy
        self.binder = binder or LocalBinder()
        self.stats = ProbeStatistics()
        self._tunnel_client = ProxyTunnelClient(proxy) if proxy else None

    def _connect(self):
        if self._tunnel_client is not None:
            return self._tunnel_client.connect(self.host, self.port, self.timeout)

        resolved = network.resolve_first(self.host, self.port)
        if resolved is None:
            return None
        family, sockaddr = resolved
        return network.open_connection(family, sockaddr, self.timeout, self.binder)

    def probe(self) -> ProbeOutcome:
        """Perform one probe and record it."""
        seq = self.stats.attempted + 1
        start = time.perf_counter()
        try:
            conn = self._connect()
        except (ProxyError, OSError) as e:
            self.stats.record_failure()
            logger.debug(f"Probe {seq} to {self.host}:{self.port} failed: {e}")
            return Failed(reason=str(e) or type(e).__name__, seq=seq)

        if conn is None:
            self.stats.record_failure()
            logger.debug(f"Probe {seq}: {self.host} did not resolve")
            return Failed(reason=UNRESOLVED_REASON, seq=seq)

        latency_ms = (time.perf_counter() - start) * 1000
        conn.close()
        self.stats.record_success(latency_ms)
        logger.debug(f"Probe {seq} to {self.host}:{self.port} connected in {latency_ms:.3f}ms")
        return Connected(latency_ms=latency_ms, seq=seq)

    @staticmethod
    def wait(duration: float, stop: threading.Event) -> None:
        """Sleep for ``duration`` seconds, returning early once ``stop`` is set."""
        deadline = time.monotonic() + duration
        while not stop.is_set():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            stop.wait(min(POLL_INTERVAL, remaining))

    def run(
        self,
        count: int,
        stop: threading.Event,
        on_probe: Callable[[ProbeOutcome], None] | None = None,
    ) -> ProbeStatistics:
        """Probe the target ``count`` times, or until stopped when ``count`` is 0.

        Args:
            count: Number of probes, 0 for unbounded
            stop: Cancellation flag shared with the signal handler
            on_probe: Called with each outcome as soon as it is known

        Returns:
            ProbeStatistics: The engine's statistics
        """
        if count < 0:
            raise ValueError("count must be zero or positive")

        logger.debug(
            f"Probing {self.host}:{self.port} "
            f"({'until stopped' if count == 0 else f'{count} times'})"
        )
        done = 0
        while not stop.is_set():
            outcome = self.probe()
            done += 1
            if on_probe is not None:
                on_probe(outcome)

            if count and done >= count:
                break
            self.wait(PROBE_INTERVAL, stop)

        logger.debug(f"Probe session finished after {done} probes")
        return self.stats
