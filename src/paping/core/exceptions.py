"""Custom exceptions for paping.

Two families are defined here:
- Configuration errors, raised while turning user input into a proxy
  configuration or a local bind address. These are fatal: the command
  reports them and stops before the first probe.
- Proxy errors, raised by the SOCKS5 tunnel client during a single probe.
  The probe engine counts each one as a failed probe and carries on.

Plain socket failures (``OSError``, ``TimeoutError``) are not wrapped and are
handled by the engine the same way as proxy errors.

Example:
    try:
        sock = client.connect("example.com", 443, timeout=1.0)
    except ConnectError as e:
        console.print(f"[red]Proxy refused: {e.reason}")
"""


class PapingError(Exception):
    """Base exception for paping errors."""


class ConfigError(PapingError):
    """Raised when user-supplied configuration is unusable."""


class FormatError(ConfigError):
    """Raised when a proxy URL cannot be parsed."""


class InvalidBindAddressError(ConfigError):
    """Raised when the local interface address is not an IP literal."""


class ProxyError(PapingError):
    """Base exception for SOCKS5 tunnel failures."""


class ResolutionError(ProxyError):
    """Raised when the proxy host resolves to no address."""


class ProtocolError(ProxyError):
    """Raised when the proxy answers with something that is not SOCKS5."""


class ConnectError(ProxyError):
    """Raised when the proxy rejects the CONNECT request."""

    def __init__(self, reason: str, code: int | None = None) -> None:
        self.reason = reason
        self.code = code
        super().__init__(f"SOCKS5 proxy error: {reason}")


class AuthenticationFailedError(ProxyError):
    """Raised when the proxy rejects the username/password."""


class AuthMethodRejectedError(ProxyError):
    """Raised when the proxy accepts none of the offered methods."""


class UnsupportedMethodError(ProxyError):
    """Raised when the proxy selects a method that was never offered."""

    def __init__(self, method: int) -> None:
        self.method = method
        super().__init__(f"SOCKS5 proxy: unsupported auth method 0x{method:02x}")


class DomainTooLongError(ProxyError):
    """Raised when a target name does not fit the one-byte length field."""


class SignalHandlerError(PapingError):
    """Raised when the Ctrl+C handler cannot be installed."""
