"""Core probing implementation.

This package contains the components that measure TCP reachability:
- SOCKS5 tunnel client (RFC 1928 / RFC 1929)
- Address resolution and local binding
- The probe loop and its statistics
- Terminal output and logging helpers
- Exception handling

The core package does no argument parsing; the command-line layer builds
its inputs and reads its statistics.
"""
