"""Probe session command interface.

This module provides a high-level interface for:
- Validating the proxy URL and local bind address
- Installing the Ctrl+C handler that stops the session
- Running the probe engine with live output
- Printing the closing statistics

Example:
    # Probe example.com:443 four times through a local SOCKS5 proxy
    run_ping("example.com", 443, count=4, proxy_url="socks5://127.0.0.1:1080")
"""

import signal
import threading

from loguru import logger

from paping.core.exceptions import SignalHandlerError
from paping.core.lib.probe_engine import ProbeEngine
from paping.core.lib.probe_stats import ProbeSummary
from paping.core.network import binder_for, interface_for_address, parse_bind_address
from paping.core.socks5 import ProxyConfig
from paping.core.utils.prompt.probe_ui import ProbeUI

MS_PER_SECOND = 1000


def install_stop_handler(stop: threading.Event):
    """Set ``stop`` on SIGINT instead of raising KeyboardInterrupt.

    Returns:
        The previously installed SIGINT handler

    Raises:
        ValueError: If called outside the main thread
        OSError: If the handler cannot be installed
    """

    def _handler(signum, frame) -> None:
        # Event.set() takes a lock the interrupted main thread may hold in wait()
        threading.Thread(target=stop.set, daemon=True).start()

    return signal.signal(signal.SIGINT, _handler)


def run_ping(
    address: str,
    port: int,
    count: int = 0,
    timeout_ms: int = 1000,
    proxy_url: str | None = None,
    interface: str | None = None,
    stop: threading.Event | None = None,
) -> ProbeSummary:
    """Run a probe session and print its results.

    Args:
        address: Target host name or IP literal
        port: Target TCP port
        count: Number of probes, 0 for unbounded
        timeout_ms: Per-connect timeout in milliseconds
        proxy_url: Optional SOCKS5 proxy URL
        interface: Optional local IP to bind direct probes to
        stop: Cancellation flag; a SIGINT handler is installed when omitted

    Returns:
        ProbeSummary: Final statistics

    Raises:
        ConfigError: If the proxy URL or interface address is invalid
        SignalHandlerError: If the Ctrl+C handler cannot be installed
    """
    proxy = ProxyConfig.from_url(proxy_url) if proxy_url else None
    bind_address = parse_bind_address(interface) if interface else None
    if bind_address is not None and interface_for_address(bind_address) is None:
        logger.warning(f"{bind_address} is not assigned to any local interface")

    previous_handler = None
    if stop is None:
        stop = threading.Event()
        try:
            previous_handler = install_stop_handler(stop)
        except (ValueError, OSError) as e:
            raise SignalHandlerError(f"Error setting Ctrl-C handler: {e}") from e

    engine = ProbeEngine(
        address,
        port,
        timeout=timeout_ms / MS_PER_SECOND,
        proxy=proxy,
        binder=binder_for(bind_address),
    )
    ui = ProbeUI(address, port, proxy)

    ui.print_header(bind_address)
    try:
        stats = engine.run(count, stop, on_probe=ui.print_outcome)
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)
    summary = stats.summary()
    ui.print_statistics(summary)
    return summary
