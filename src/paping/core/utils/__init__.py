"""Utility functions and helpers."""

from paping.core.utils.prompt import PromptHandler, ProbeUI
from paping.core.utils.utils import format_latency, format_percent

__all__ = ["format_latency", "format_percent", "PromptHandler", "ProbeUI"]
