"""Statistics tracking for a probe session.

This module keeps the running counters of a probe session:
- Attempted, connected and failed probe counts
- Latency samples of every successful probe, in order

Each probe is recorded with a single locked update, so a reader never sees
a probe counted as attempted but not yet as connected or failed. The engine
is the only writer; a reporter may read a summary at any time.

Example:
    stats = ProbeStatistics()
    stats.record_success(12.5)
    stats.record_failure()
    print(stats.summary().failed_percent)  # 50.0
"""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeSummary:
    """Point-in-time view of a probe session.

    Attributes:
        attempted: Number of probes started
        connected: Number of probes that reached the target
        failed: Number of probes that did not
        failed_percent: ``failed / attempted * 100``, or 0 with no probes
        minimum: Lowest latency in milliseconds, None without samples
        maximum: Highest latency in milliseconds, None without samples
        average: Mean latency in milliseconds, None without samples
    """

    attempted: int
    connected: int
    failed: int
    failed_percent: float
    minimum: float | None = None
    maximum: float | None = None
    average: float | None = None


class ProbeStatistics:
    """Counters and latency samples for one probe session."""

    def __init__(self) -> None:
        self.attempted = 0
        self.connected = 0
        self.failed = 0
        self.latencies: list[float] = []
        self._lock = threading.Lock()

    def record_success(self, latency_ms: float) -> None:
        """Record a probe that connected after ``latency_ms`` milliseconds."""
        with self._lock:
            self.attempted += 1
            self.connected += 1
            self.latencies.append(latency_ms)

    def record_failure(self) -> None:
        """Record a probe that failed."""
        with self._lock:
            self.attempted += 1
            self.failed += 1

    @property
    def failed_percent(self) -> float:
        if self.attempted == 0:
            return 0.0
        return self.failed / self.attempted * 100

    def summary(self) -> ProbeSummary:
        """Return the current counters and latency aggregates."""
        with self._lock:
            latencies = list(self.latencies)
            attempted, connected, failed = self.attempted, self.connected, self.failed

        failed_percent = failed / attempted * 100 if attempted else 0.0
        if not latencies:
            return ProbeSummary(attempted, connected, failed, failed_percent)

        return ProbeSummary(
            attempted=attempted,
            connected=connected,
            failed=failed,
            failed_percent=failed_percent,
            minimum=min(latencies),
            maximum=max(latencies),
            average=sum(latencies) / len(latencies),
        )
