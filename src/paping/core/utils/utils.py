"""Common formatting helpers."""

from typing import Final

LATENCY_PRECISION: Final = 2
PERCENT_PRECISION: Final = 1


def format_latency(ms: float) -> str:
    """Format a latency in milliseconds.

    Args:
        ms: Latency in milliseconds

    Returns:
        str: Value with two decimals and an ``ms`` suffix
    """
    return f"{ms:.{LATENCY_PRECISION}f}ms"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal."""
    return f"{value:.{PERCENT_PRECISION}f}%"
