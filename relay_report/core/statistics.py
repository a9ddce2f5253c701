"""Overall relay statistics derived from a collection of test logs.

All functions are pure and total: empty collections produce zero results
rather than errors. Values are returned unrounded; formatting for display
happens in the reporting layer.
"""

from __future__ import annotations

from collections.abc import Sequence

from .types import AggregateSummary, TestLogEntry, ValidatorMetrics

# Trailing windows of "recent" logs shown by each output format
SUMMARY_RECENT_LOGS = 10
MARKDOWN_RECENT_LOGS = 10
HTML_RECENT_LOGS = 20


def successful_count(logs: Sequence[TestLogEntry]) -> int:
    """Count log entries whose relay succeeded."""
    return sum(1 for log in logs if log.success)


def overall_success_rate(logs: Sequence[TestLogEntry]) -> float:
    """
    Compute the percentage of successful relay attempts.

    Args:
        logs: Relay test log entries

    Returns:
        Success rate in [0, 100]; 0 when there are no logs
    """
    if not logs:
        return 0.0
    return successful_count(logs) / len(logs) * 100


def average_latency(logs: Sequence[TestLogEntry]) -> float:
    """
    Compute mean latency over successful relay attempts only.

    Failed attempts carry no meaningful completion latency, so they are
    excluded entirely rather than diluting the average.

    Args:
        logs: Relay test log entries

    Returns:
        Average latency in milliseconds; 0 when nothing succeeded
    """
    latencies = [log.latency for log in logs if log.success]
    if not latencies:
        return 0.0
    return sum(latencies) / len(latencies)


def compute_aggregate_summary(
    logs: Sequence[TestLogEntry],
    metrics: Sequence[ValidatorMetrics],
) -> AggregateSummary:
    """Derive the overall summary for one report generation."""
    return AggregateSummary(
        success_rate=overall_success_rate(logs),
        average_latency=average_latency(logs),
        total_tests=len(logs),
        successful_tests=successful_count(logs),
        active_validators=len(metrics),
    )


def recent_logs(logs: Sequence[TestLogEntry], window: int) -> list[TestLogEntry]:
    """
    Select the last ``window`` entries, newest first.

    Logs are assumed to be in chronological order.

    Examples:
        >>> recent_logs([a, b, c], 2)
        [c, b]
    """
    if window <= 0:
        return []
    trailing = list(logs[-window:])
    trailing.reverse()
    return trailing
