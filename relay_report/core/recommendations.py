"""Advisory synthesis from aggregate and per-validator statistics.

Rules are evaluated independently and any number may fire. When none of
them fires a single ALL_NOMINAL advisory is returned, so the result is never
empty.
"""

from __future__ import annotations

from collections.abc import Sequence

from .types import (
    AggregateSummary,
    Recommendation,
    RecommendationKind,
    RecommendationSeverity,
    ValidatorMetrics,
)

LOW_OVERALL_SUCCESS_RATE = 80.0  # percent, strict lower-than
HIGH_AVERAGE_LATENCY_MS = 10000.0  # strict greater-than
POOR_VALIDATOR_SUCCESS_RATE = 70.0  # percent, strict lower-than


def find_poor_performers(metrics: Sequence[ValidatorMetrics]) -> list[str]:
    """Monikers of validators below the poor-performance rate, in input order."""
    return [
        m.validator_moniker
        for m in metrics
        if m.success_rate < POOR_VALIDATOR_SUCCESS_RATE
    ]


def synthesize_recommendations(
    summary: AggregateSummary,
    metrics: Sequence[ValidatorMetrics],
) -> list[Recommendation]:
    """
    Produce the ordered list of advisories for a report.

    Args:
        summary: Aggregate statistics for the report
        metrics: Validator snapshots in their natural input order

    Returns:
        One or more recommendations
    """
    recommendations: list[Recommendation] = []

    if summary.success_rate < LOW_OVERALL_SUCCESS_RATE:
        recommendations.append(
            Recommendation(
                kind=RecommendationKind.LOW_SUCCESS_RATE,
                severity=RecommendationSeverity.WARNING,
            )
        )

    if summary.average_latency > HIGH_AVERAGE_LATENCY_MS:
        recommendations.append(
            Recommendation(
                kind=RecommendationKind.HIGH_LATENCY,
                severity=RecommendationSeverity.WARNING,
            )
        )

    poor_performers = find_poor_performers(metrics)
    if poor_performers:
        recommendations.append(
            Recommendation(
                kind=RecommendationKind.POOR_VALIDATORS,
                severity=RecommendationSeverity.WARNING,
                validators=tuple(poor_performers),
            )
        )

    if not recommendations:
        recommendations.append(
            Recommendation(
                kind=RecommendationKind.ALL_NOMINAL,
                severity=RecommendationSeverity.OK,
            )
        )

    return recommendations
