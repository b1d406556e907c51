"""Core probe library components."""

from .probe_engine import Connected, Failed, ProbeEngine, ProbeOutcome
from .probe_stats import ProbeStatistics, ProbeSummary

__all__ = [
    "Connected",
    "Failed",
    "ProbeEngine",
    "ProbeOutcome",
    "ProbeStatistics",
    "ProbeSummary",
]
