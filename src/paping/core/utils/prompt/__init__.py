"""Prompt and UI utilities."""

from paping.core.utils.prompt.probe_ui import ProbeUI
from paping.core.utils.prompt.prompt import PromptHandler, console

__all__ = ["console", "PromptHandler", "ProbeUI"]
