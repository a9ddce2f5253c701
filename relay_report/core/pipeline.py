"""Composition of the statistics, ranking and recommendation stages.

``build_report_context`` is the single entry point renderers rely on: it
computes every number once so the HTML, Markdown and JSON outputs cannot
disagree.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from .ranking import RankedValidator, rank_validators
from .recommendations import synthesize_recommendations
from .statistics import compute_aggregate_summary
from .types import AggregateSummary, Recommendation, TestLogEntry, ValidatorMetrics


@dataclass(frozen=True)
class ReportContext:
    """Immutable snapshot of everything a renderer needs."""

    logs: tuple[TestLogEntry, ...]
    metrics: tuple[ValidatorMetrics, ...]  # natural input order
    summary: AggregateSummary
    ranking: tuple[RankedValidator, ...]
    recommendations: tuple[Recommendation, ...]
    generated_at: datetime


def build_report_context(
    logs: Sequence[TestLogEntry],
    metrics: Sequence[ValidatorMetrics],
    generated_at: datetime | None = None,
) -> ReportContext:
    """
    Run the full aggregation pipeline over input snapshots.

    Args:
        logs: Relay test log entries in chronological order
        metrics: Validator metric snapshots
        generated_at: Report timestamp (defaults to now, UTC)

    Returns:
        ReportContext consumed by all renderers
    """
    logs = tuple(logs)
    metrics = tuple(metrics)
    summary = compute_aggregate_summary(logs, metrics)

    return ReportContext(
        logs=logs,
        metrics=metrics,
        summary=summary,
        ranking=tuple(rank_validators(metrics)),
        recommendations=tuple(synthesize_recommendations(summary, metrics)),
        generated_at=generated_at or datetime.now(timezone.utc),
    )
