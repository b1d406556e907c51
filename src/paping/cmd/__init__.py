"""Command line interface modules.

This package provides the command-line tools for:
- Probing a target host and port, directly or through a SOCKS5 proxy
- Listing local interfaces usable as a probe source
- Displaying per-probe results and session statistics

The command modules validate user input and translate it into the inputs
of the core probe engine.
"""
